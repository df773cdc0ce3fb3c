"""
Configuration loading and logging setup.

Settings come from an optional YAML file and fall back to defaults. The
gesture set and its thresholds are fixed in gesture_detector and are not
configurable here.
"""
import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GESTURE_CENSOR_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


@dataclass
class HandsConfig:
    """MediaPipe Hands settings. Max hands is always 1."""
    model_complexity: int = 1
    min_detection_confidence: float = 0.7
    min_tracking_confidence: float = 0.7


@dataclass
class CensorConfig:
    blur_sigma: float = 30.0  # Roughly a 30px CSS blur
    padding: float = 0.05
    draw_landmarks: bool = False


@dataclass
class RtcConfig:
    ice_servers: list = field(default_factory=lambda: ["stun:stun.l.google.com:19302"])

    def to_rtc_configuration(self):
        """Dict in the shape RTCConfiguration expects."""
        return {"iceServers": [{"urls": [url]} for url in self.ice_servers]}


@dataclass
class AppConfig:
    hands: HandsConfig = field(default_factory=HandsConfig)
    censor: CensorConfig = field(default_factory=CensorConfig)
    rtc: RtcConfig = field(default_factory=RtcConfig)
    log_level: str = "INFO"


def _build_section(cls, data, section_name):
    """Build a dataclass from a dict, ignoring (and warning about) unknown keys."""
    if data is None:
        return cls()
    if not isinstance(data, dict):
        logger.warning(
            "Config section '%s' should be a mapping, got %s; using defaults",
            section_name, type(data).__name__,
        )
        return cls()

    known = {f.name for f in fields(cls)}
    for key in data:
        if key not in known:
            logger.warning("Unknown config key '%s.%s' ignored", section_name, key)
    return cls(**{k: v for k, v in data.items() if k in known})


def config_from_dict(data):
    data = data or {}
    if not isinstance(data, dict):
        logger.warning(
            "Config file should hold a mapping, got %s; using defaults", type(data).__name__
        )
        return AppConfig()

    for key in data:
        if key not in ("hands", "censor", "rtc", "log_level"):
            logger.warning("Unknown config key '%s' ignored", key)

    return AppConfig(
        hands=_build_section(HandsConfig, data.get("hands"), "hands"),
        censor=_build_section(CensorConfig, data.get("censor"), "censor"),
        rtc=_build_section(RtcConfig, data.get("rtc"), "rtc"),
        log_level=str(data.get("log_level", "INFO")),
    )


def load_config(path=None):
    """
    Load configuration from a YAML file.

    Args:
        path: Config file. If None, uses $GESTURE_CENSOR_CONFIG, then
            config.yaml next to this module

    Returns:
        AppConfig, with defaults for anything the file leaves out
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH

    config_path = Path(path)
    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file not found: %s, using defaults", config_path)
        return AppConfig()

    logger.info("Loaded config from %s", config_path)
    return config_from_dict(data)


def setup_logging(level="INFO"):
    """Console logging for the app. Safe to call on every Streamlit rerun."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    root_logger.handlers.clear()
    console = logging.StreamHandler()
    console.setFormatter(
        logging.Formatter("%(asctime)s  %(levelname)-5s  %(message)s", datefmt="%H:%M:%S")
    )
    root_logger.addHandler(console)
    return root_logger
