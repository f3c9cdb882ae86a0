import sys
import types

import pytest

# The editor supplies sublime and sublime_plugin at runtime. These doubles
# cover only the parts of the API the package touches.
sublime = types.ModuleType("sublime")
sublime_plugin = types.ModuleType("sublime_plugin")

sublime.OP_EQUAL = 0
sublime.OP_NOT_EQUAL = 1


class Settings(dict):
    def set(self, key, value):
        self[key] = value

    def erase(self, key):
        self.pop(key, None)


class View:
    def __init__(self):
        self.status = {}

    def set_status(self, key, value):
        self.status[key] = value

    def erase_status(self, key):
        self.status.pop(key, None)


class Window:
    def __init__(self, views):
        self._views = views

    def views(self):
        return list(self._views)


class Host:
    def __init__(self):
        self.settings = {}
        self.windows = []
        self.messages = []

    def load_settings(self, name):
        return self.settings.setdefault(name, Settings())


host = Host()
sublime.load_settings = lambda name: host.load_settings(name)
sublime.windows = lambda: list(host.windows)
sublime.status_message = lambda msg: host.messages.append(msg)


class ApplicationCommand:
    pass


class EventListener:
    pass


sublime_plugin.ApplicationCommand = ApplicationCommand
sublime_plugin.EventListener = EventListener

sys.modules.setdefault("sublime", sublime)
sys.modules.setdefault("sublime_plugin", sublime_plugin)


@pytest.fixture
def editor():
    from PresentationMode import presentation_mode

    host.settings.clear()
    host.messages[:] = []
    host.views = [View(), View()]
    host.windows = [Window(host.views[:1]), Window(host.views[1:])]
    host.load_settings("Preferences.sublime-settings").set("font_size", 10)

    presentation_mode.plugin_loaded()
    yield host
    presentation_mode.g_toggle = None
