from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from postip import constants


class ConfigError(ValueError):
	pass


@dataclass(slots=True)
class TooltipConfig:
	"""Per-session tooltip settings.

	Values left at their defaults come from ``postip.constants``. ``configure``
	and ``from_mapping`` validate what they are given:

	* ``default_timeout`` is used by ``show`` when no timeout is passed; a
	  non-positive value means tooltips stay until hidden.
	* ``max_columns`` / ``max_rows`` bound ``show_auto_sized`` (``None`` for
	  no limit).
	* ``header_height_fallback`` replaces the reported glyph height with the
	  frame's nominal character height when the viewport has a header line.
	"""

	default_timeout: float = constants.DEFAULT_TIMEOUT
	border_width: int = constants.DEFAULT_BORDER_WIDTH
	internal_border_width: int = constants.DEFAULT_INTERNAL_BORDER_WIDTH
	max_columns: int | None = None
	max_rows: int | None = None
	header_height_fallback: bool = True
	inspector_timeout: float = constants.INSPECTOR_TIMEOUT
	style_name: str = constants.DEFAULT_STYLE_NAME

	def __post_init__(self) -> None:
		self._validate()

	def configure(self, **overrides: Any) -> None:
		known = {f.name for f in fields(self)}
		unknown = sorted(set(overrides) - known)
		if unknown:
			raise ConfigError(f"Unknown tooltip setting(s): {', '.join(unknown)}")
		for key, value in overrides.items():
			setattr(self, key, value)
		self._validate()

	@classmethod
	def from_mapping(cls, raw: Mapping[str, Any] | None) -> "TooltipConfig":
		config = cls()
		if raw:
			if not isinstance(raw, Mapping):
				raise ConfigError("Tooltip settings must be a mapping.")
			config.configure(**dict(raw))
		return config

	def _validate(self) -> None:
		try:
			self.default_timeout = float(self.default_timeout)
			self.inspector_timeout = float(self.inspector_timeout)
			self.border_width = int(self.border_width)
			self.internal_border_width = int(self.internal_border_width)
		except (TypeError, ValueError) as exc:
			raise ConfigError(f"Invalid tooltip setting: {exc}") from exc
		if self.border_width < 0 or self.internal_border_width < 0:
			raise ConfigError("Border widths must be non-negative.")
		if self.inspector_timeout <= 0:
			raise ConfigError("inspector_timeout must be positive.")
		for name in ("max_columns", "max_rows"):
			value = getattr(self, name)
			if value is None:
				continue
			if isinstance(value, bool) or not isinstance(value, int) or value < 1:
				raise ConfigError(f"{name} must be a positive integer or None.")
		if not isinstance(self.style_name, str) or not self.style_name:
			raise ConfigError("style_name must be a non-empty string.")
		self.header_height_fallback = bool(self.header_height_fallback)
