"""Config validation errors."""
from optionkit.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value cannot be used."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": repr(value)},
        )
        self.setting_name = setting_name
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
