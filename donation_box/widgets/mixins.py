from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor


class SaveSizeAndPositionOnClose:
    settings = None
    key = None

    def restore_geometry(self, settings, key, default_width, default_height):
        self.settings = settings
        self.key = key

        width = int(settings.value(f"{key}/width", default_width))
        height = int(settings.value(f"{key}/height", default_height))
        left = settings.value(f"{key}/left", None)
        top = settings.value(f"{key}/top", None)

        self.resize(width, height)
        if left is not None and top is not None:
            self.move(int(left), int(top))

    def save_geometry(self):
        if self.settings is None:
            return
        self.settings.setValue(f"{self.key}/width", self.size().width())
        self.settings.setValue(f"{self.key}/height", self.size().height())
        self.settings.setValue(f"{self.key}/left", self.pos().x())
        self.settings.setValue(f"{self.key}/top", self.pos().y())

    def closeEvent(self, event):
        self.save_geometry()
        event.accept()


class HideTitleBarOptional:
    _title_bar_hidden = False
    _press_pos = None

    @property
    def title_bar_hidden(self):
        return self._title_bar_hidden

    @title_bar_hidden.setter
    def title_bar_hidden(self, hidden):
        self._title_bar_hidden = hidden

        if hidden:
            self.setWindowFlags(self.windowFlags() | Qt.FramelessWindowHint)
        else:
            self.setWindowFlags(self.windowFlags() & ~Qt.FramelessWindowHint)

    # Frameless windows are dragged by their body instead
    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._press_pos = event.pos()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._press_pos = None

    def mouseMoveEvent(self, event):
        if self._press_pos is not None:
            self.move(self.pos() + (event.pos() - self._press_pos))


class ControllableBackgroundAndTextColour:
    _background_colour = QColor(Qt.magenta)
    _text_colour = QColor(Qt.white)

    def restore_colours(self, settings):
        self.background_colour = QColor(
            settings.value("background_colour", self._background_colour)
        )
        self.text_colour = QColor(
            settings.value(f"{self.key}/text_colour", self._text_colour)
        )

    @property
    def background_colour(self):
        return self._background_colour

    @background_colour.setter
    def background_colour(self, colour):
        self._background_colour = colour
        self.update_stylesheet()

    @property
    def text_colour(self):
        return self._text_colour

    @text_colour.setter
    def text_colour(self, colour):
        self._text_colour = colour
        self.update_stylesheet()

    def update_stylesheet(self):
        self.setStyleSheet(
            f"color: {self.text_colour.name()};"
            f"background-color: {self.background_colour.name()};"
        )
