"""Menu screens: text labels, clickable buttons and the menus holding them."""

from __future__ import annotations

from collections.abc import Iterator

import pygame

DEFAULT_FONT_PATH = "FreeSans.ttf"
FONT_SIZE = 24

BUTTON_IDLE_COLOR = (255, 0, 0)
BUTTON_HOVER_COLOR = (200, 0, 0)
START_BUTTON = "start"

Color = tuple[int, int, int]


def load_font(path: str | None = DEFAULT_FONT_PATH, size: int = FONT_SIZE) -> pygame.font.Font:
    """Open the font at ``path``, falling back to pygame's default font."""
    if not pygame.font.get_init():
        pygame.font.init()
    if path is not None:
        try:
            return pygame.font.Font(path, size)
        except (FileNotFoundError, OSError):
            pass
    return pygame.font.Font(None, size)


class Text:
    """A line of text rendered once and stretched over a rectangle."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        text: str,
        color: Color,
        font: pygame.font.Font | None = None,
    ) -> None:
        self.text = text
        self.color = tuple(color)
        self.rect = pygame.Rect(x, y, width, height)
        font = font if font is not None else load_font()
        self.message = font.render(text, False, self.color)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the text scaled to its rectangle; empty text draws nothing."""
        if self.message.get_width() == 0 or self.message.get_height() == 0:
            return
        image = self.message
        if image.get_size() != self.rect.size:
            image = pygame.transform.scale(image, self.rect.size)
        surface.blit(image, self.rect)


class Button:
    """A rectangle that highlights under the mouse and records clicks."""

    def __init__(self, name: str, color: Color, x: int, y: int, width: int, height: int) -> None:
        self.name = name
        self.color = tuple(color)
        self.rect = pygame.Rect(x, y, width, height)
        self.pressed = False

    def update(self, event: pygame.event.Event) -> None:
        """React to a mouse event: hover highlight and press on click."""
        pos = getattr(event, "pos", None)
        if pos is None:
            return
        if self.rect.collidepoint(pos):
            self.color = BUTTON_HOVER_COLOR
            if event.type == pygame.MOUSEBUTTONDOWN:
                self.pressed = True
        else:
            self.color = BUTTON_IDLE_COLOR

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(self.color, self.rect)


class Menu:
    """A named screen made of buttons and text labels."""

    def __init__(self, name: str, font_path: str | None = DEFAULT_FONT_PATH) -> None:
        self.name = name
        self.font = load_font(font_path)
        self.texts: list[Text] = []
        self.buttons: list[Button] = []

    def render(self, surface: pygame.Surface) -> None:
        """Draw buttons first, then the text on top of them."""
        for button in self.buttons:
            button.draw(surface)
        for text in self.texts:
            text.render(surface)

    def handle_event(self, event: pygame.event.Event) -> None:
        for button in self.buttons:
            button.update(event)

    def update(self) -> bool:
        """Return False once the start button has been pressed, else True."""
        for button in self.buttons:
            if button.pressed and button.name == START_BUTTON:
                button.pressed = False
                return False
        return True

    def add_text(self, x: int, y: int, width: int, height: int, text: str, color: Color) -> Text:
        label = Text(x, y, width, height, text, color, self.font)
        self.texts.append(label)
        return label

    def add_button(self, x: int, y: int, width: int, height: int, name: str, color: Color) -> Button:
        button = Button(name, color, x, y, width, height)
        self.buttons.append(button)
        return button


class MenuManager:
    """Holds the menus and tracks which one is shown."""

    def __init__(self, font_path: str | None = DEFAULT_FONT_PATH) -> None:
        self.font_path = font_path
        self.menus: list[Menu] = []
        self.current_menu: Menu | None = None

    def __iter__(self) -> Iterator[Menu]:
        return iter(self.menus)

    def add_menu(self, name: str) -> Menu:
        menu = Menu(name, self.font_path)
        self.menus.append(menu)
        return menu

    def set_current_menu(self, name: str) -> None:
        """Switch to the first menu called ``name``; unknown names are ignored."""
        menu = next((m for m in self.menus if m.name == name), None)
        if menu is not None:
            self.current_menu = menu

    def delete_menu(self, menu: Menu) -> None:
        """Remove ``menu`` if it is managed here."""
        if any(m is menu for m in self.menus):
            self.menus = [m for m in self.menus if m is not menu]
            if self.current_menu is menu:
                self.current_menu = None