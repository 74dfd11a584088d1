"""
Shared pytest fixtures for hyprtile tests.
"""

import pytest
from pubsub import pub

from hyprtile.geometry import Rectangle
from hyprtile.host import (
    CompositorActor,
    Desktop,
    FrameType,
    WindowHandle,
    WindowType,
)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a desktop")


@pytest.fixture(autouse=True)
def clean_bus():
    """Drop all bus listeners a test left behind."""
    yield
    pub.unsubAll()


class MockActor(CompositorActor):
    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.eases = []

    def ease(self, *, duration, mode, **properties):
        self.eases.append(dict(properties, duration=duration, mode=mode))


class MockWindow(WindowHandle):
    def __init__(
        self,
        id=1,
        title="test",
        rect=None,
        monitor_index=0,
        minimized=False,
        frame_type=FrameType.NORMAL,
        window_type=WindowType.NORMAL,
    ):
        self.id = id
        self.title = title
        self.rect = rect or Rectangle(0, 0, 800, 600)
        self.monitor_index = monitor_index
        self.minimized = minimized
        self.frame_type = frame_type
        self.window_type = window_type
        self.actor = MockActor(self.rect.width, self.rect.height)
        self.calls = []

    def get_frame_rect(self):
        return self.rect.copy()

    def get_compositor_actor(self):
        return self.actor

    def unmaximize(self):
        self.calls.append(("unmaximize",))

    def move_frame(self, x, y):
        self.calls.append(("move_frame", x, y))
        self.rect = Rectangle(x, y, self.rect.width, self.rect.height)

    def move_resize_frame(self, x, y, width, height):
        self.calls.append(("move_resize_frame", x, y, width, height))
        self.rect = Rectangle(x, y, width, height)
        self.actor.width = width
        self.actor.height = height


class MockDesktop(Desktop):
    def __init__(self, work_area=None):
        self.workspace_index = 0
        self.monitor_index = 0
        self.pointer = (0, 0)
        self.work_area = work_area or Rectangle(0, 0, 1920, 1080)
        self.windows = {}  # workspace index -> [MockWindow]

    def add_window(self, window, workspace_index=0):
        self.windows.setdefault(workspace_index, []).append(window)
        return window

    def remove_window(self, window, workspace_index=0):
        self.windows[workspace_index].remove(window)

    def get_active_workspace_index(self):
        return self.workspace_index

    def get_current_monitor(self):
        return self.monitor_index

    def list_windows(self, workspace_index):
        return list(self.windows.get(workspace_index, []))

    def get_work_area(self, workspace_index, monitor_index):
        return self.work_area.copy()

    def get_pointer(self):
        return self.pointer


@pytest.fixture
def mock_window():
    """Factory fixture for creating mock window objects."""
    return MockWindow


@pytest.fixture
def mock_desktop():
    """Desktop with a single 1920x1080 monitor and no windows."""
    return MockDesktop()


@pytest.fixture
def standard_area():
    """Standard 1920x1080 area for layout tests."""
    return Rectangle(0, 0, 1920, 1080)


@pytest.fixture
def portrait_area():
    """Portrait 1080x1920 area for layout tests."""
    return Rectangle(0, 0, 1080, 1920)
