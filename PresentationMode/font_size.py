FONT_SIZE = "font_size"
DEFAULT_FONT_SIZE = 10

PRESENTATION_HEIGHT = "presentation_font_height"
HEIGHT_STEP = "font_height_step"
SHOW_HINT = "show_hint"

DEFAULT_PRESENTATION_HEIGHT = 120
DEFAULT_HEIGHT_STEP = 10

HINT = "Presentation mode: press + or = to enlarge, - to shrink"

# Heights are tenths of a point: height 120 is font_size 12.
def to_height(font_size):
    return round(font_size * 10, 6)

def to_font_size(height):
    size = height / 10
    if size == int(size):
        return int(size)
    return size

class FontHeight:
    """The font_size preference, read and written as a height."""

    def __init__(self, prefs):
        self.prefs = prefs

    def get(self):
        return to_height(self.prefs.get(FONT_SIZE, DEFAULT_FONT_SIZE))

    def set(self, height):
        self.prefs.set(FONT_SIZE, to_font_size(height))

    # The raw preference, None when the user never set one
    def snapshot(self):
        return self.prefs.get(FONT_SIZE)

    def restore(self, font_size):
        if font_size is None:
            self.prefs.erase(FONT_SIZE)
        else:
            self.prefs.set(FONT_SIZE, font_size)

class PresentationToggle:
    def __init__(self, font, settings, notify=None):
        self.font = font
        self.settings = settings
        self.notify = notify
        self.active = False
        self.transient_armed = False
        self.saved_font_size = self.font.snapshot()

    @property
    def saved_size(self):
        if self.saved_font_size is None:
            return to_height(DEFAULT_FONT_SIZE)
        return to_height(self.saved_font_size)

    def presentation_size(self):
        return self.settings.get(PRESENTATION_HEIGHT,
            DEFAULT_PRESENTATION_HEIGHT)

    def step(self):
        return self.settings.get(HEIGHT_STEP, DEFAULT_HEIGHT_STEP)

    def current_size(self):
        return self.font.get()

    def set_size(self, size):
        self.font.set(size)

    def adjust_size(self, offset_steps):
        self.set_size(self.current_size() + offset_steps * self.step())

    def increase(self, steps=1):
        self.adjust_size(steps)

    def decrease(self, steps=1):
        self.adjust_size(-steps)

    def toggle(self):
        if self.active:
            self.font.restore(self.saved_font_size)
            self.disarm_transient_keys()
            self.active = False
        else:
            self.saved_font_size = self.font.snapshot()
            self.set_size(self.presentation_size())
            self.active = True
            self.arm_transient_keys()
            if self.notify and self.settings.get(SHOW_HINT, True):
                self.notify(HINT)
        return self.active

    def reset(self):
        if self.active:
            self.set_size(self.presentation_size())
        else:
            self.font.restore(self.saved_font_size)

    def restore(self):
        if self.active:
            self.toggle()

    # One-shot key scope: armed on activation, gone after the next command
    def arm_transient_keys(self):
        self.transient_armed = True

    def disarm_transient_keys(self):
        self.transient_armed = False

    def transient_keys_armed(self):
        return self.transient_armed
