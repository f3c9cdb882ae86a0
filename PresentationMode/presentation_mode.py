import sublime, sublime_plugin

from .font_size import FontHeight, PresentationToggle

SETTINGS_FILE = "PresentationMode.sublime-settings"
PREFERENCES_FILE = "Preferences.sublime-settings"

STATUS_KEY = "presentation_mode"

# Context key answered in on_query_context, used by Default.sublime-keymap
TRANSIENT_KEY = "presentation_mode_transient"

g_toggle = None

def settings():
    return sublime.load_settings(SETTINGS_FILE)

def debug(*args):
    if settings().get("debug", False):
        print("PresentationMode:", *args)

def all_views():
    for w in sublime.windows():
        for v in w.views():
            yield v

def update_status(view):
    if g_toggle and g_toggle.active:
        view.set_status(STATUS_KEY, "Presentation: %g" % g_toggle.current_size())
    else:
        view.erase_status(STATUS_KEY)

def update_all_status():
    for v in all_views():
        update_status(v)

def plugin_loaded():
    global g_toggle
    prefs = sublime.load_settings(PREFERENCES_FILE)
    g_toggle = PresentationToggle(FontHeight(prefs), settings(),
        sublime.status_message)
    debug("saved size", g_toggle.saved_size)

# Called when the package is unloaded or disabled. The enlarged size must not
# outlive the package.
def plugin_unloaded():
    if g_toggle is None:
        return
    g_toggle.restore()
    for v in all_views():
        v.erase_status(STATUS_KEY)

class TogglePresentationModeCommand(sublime_plugin.ApplicationCommand):
    def run(self):
        active = g_toggle.toggle()
        debug("active" if active else "inactive", g_toggle.current_size())
        update_all_status()

    def is_checked(self):
        return bool(g_toggle and g_toggle.active)

class AdjustPresentationFont(sublime_plugin.ApplicationCommand):
    direction = 1

    def run(self, steps=1, transient=False):
        # The one-shot bindings always move a single step
        if transient:
            steps = 1
            g_toggle.disarm_transient_keys()
        g_toggle.adjust_size(self.direction * steps)
        debug("adjusted by", self.direction * steps, "to",
            g_toggle.current_size())
        update_all_status()

class IncreasePresentationFontCommand(AdjustPresentationFont):
    direction = 1

class DecreasePresentationFontCommand(AdjustPresentationFont):
    direction = -1

class ResetPresentationFontCommand(sublime_plugin.ApplicationCommand):
    def run(self):
        g_toggle.reset()
        update_all_status()

def compare(value, operator, operand):
    if operator == sublime.OP_EQUAL:
        return value == operand
    if operator == sublime.OP_NOT_EQUAL:
        return value != operand
    return None

class PresentationModeListener(sublime_plugin.EventListener):
    def on_query_context(self, view, key, operator, operand, match_all):
        if g_toggle is None:
            return None
        if key == TRANSIENT_KEY:
            return compare(g_toggle.transient_keys_armed(), operator, operand)
        return None

    # Any other command ends the transient scope, including mouse driven ones
    # such as drag_select, so a click disarms it too
    def on_window_command(self, window, command_name, args):
        self.end_transient(command_name)

    def on_text_command(self, view, command_name, args):
        self.end_transient(command_name)

    def end_transient(self, command_name):
        if g_toggle and g_toggle.transient_keys_armed():
            debug("transient keys off after", command_name)
            g_toggle.disarm_transient_keys()

    def on_activated(self, view):
        update_status(view)

    def on_new(self, view):
        update_status(view)

    def on_load(self, view):
        update_status(view)
