from PySide6.QtCore import QSettings, Signal

# Defaults for settings that are accessed from multiple places.
DEFAULT_SETTINGS = {
    'snapping_enabled': True,
    'scroll_friction': 0.015,  # Same as the platform default scroll friction
    'min_fling_velocity_dp': 50,
    'max_fling_velocity_dp': 8000,
    'snap_scroll_duration_ms': 250,
    'snap_trace_logs': False,  # Print SNAP/FLING/IDLE trace lines to stdout
    'demo_item_extent': 96,
    'demo_item_count': 200,
    'demo_layout_mode': 'vertical_list',  # vertical_list, horizontal_list or grid
}

LAYOUT_MODES = ('vertical_list', 'horizontal_list', 'grid')


class Settings(QSettings):
    # Signal that shows that the setting with the given string was changes
    change = Signal(str, object, name='settingsChanged')

    def __init__(self):
        super().__init__('snapview', 'snapview')

    def setValue(self, key, value):
        super().setValue(key, value)
        self.change.emit(key, value)

# Common shared instance to ensure the Signal is also shared
settings = Settings()


def get_bool_setting(key: str) -> bool:
    default = DEFAULT_SETTINGS[key]
    try:
        return bool(settings.value(key, defaultValue=default, type=bool))
    except Exception:
        return bool(default)


def get_int_setting(key: str) -> int:
    default = DEFAULT_SETTINGS[key]
    try:
        return int(settings.value(key, defaultValue=default, type=int))
    except Exception:
        return int(default)


def get_float_setting(key: str) -> float:
    default = DEFAULT_SETTINGS[key]
    try:
        value = float(settings.value(key, defaultValue=default, type=float))
    except Exception:
        return float(default)
    # Friction and velocity limits must stay positive.
    return value if value > 0 else float(default)


def get_layout_mode() -> str:
    mode = settings.value('demo_layout_mode', defaultValue=DEFAULT_SETTINGS['demo_layout_mode'], type=str)
    if mode not in LAYOUT_MODES:
        return DEFAULT_SETTINGS['demo_layout_mode']
    return mode
