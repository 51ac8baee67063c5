"""
Immutable font descriptors.

A descriptor is an attribute-keyed description of a font. Adding attributes
always produces a new descriptor; feature settings from several requests are
merged so that each OpenType tag and each AAT feature type appears once.
"""

import copy
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .config import CONFIG
from .features import FontAttributes, FontFeatures


def setting_key(setting: Mapping[str, Any]) -> Tuple[str, Any]:
    """Identity of a feature setting: its OpenType tag or its AAT type."""
    if CONFIG.OPENTYPE_FEATURE_TAG in setting:
        return ("tag", setting[CONFIG.OPENTYPE_FEATURE_TAG])
    if CONFIG.FEATURE_TYPE_IDENTIFIER in setting:
        return ("type", setting[CONFIG.FEATURE_TYPE_IDENTIFIER])
    return ("setting", repr(sorted(setting.items(), key=lambda kv: kv[0])))


def merge_feature_settings(
    existing: List[Mapping[str, Any]], additions: List[Mapping[str, Any]]
) -> List[Dict[str, Any]]:
    """
    Merge feature settings, last write wins per key.

    A setting that differs from the stored one for its key replaces it and
    moves to the end; an identical one is left where it is.
    """
    merged = [dict(s) for s in existing]
    for setting in additions:
        setting = dict(setting)
        if setting in merged:
            continue
        key = setting_key(setting)
        merged = [s for s in merged if setting_key(s) != key]
        merged.append(setting)
    return merged


def _freeze(value: Any) -> Any:
    """Hashable copy of a nested attribute value."""
    if isinstance(value, Mapping):
        return frozenset((key, _freeze(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


class FontDescriptor:
    """Immutable attribute mapping describing a font."""

    __slots__ = ("_attributes",)

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None):
        object.__setattr__(
            self, "_attributes", MappingProxyType(copy.deepcopy(dict(attributes or {})))
        )

    def __setattr__(self, name, value):
        raise AttributeError("FontDescriptor is immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, FontDescriptor):
            return NotImplemented
        return dict(self._attributes) == dict(other._attributes)

    def __hash__(self) -> int:
        return hash(_freeze(self._attributes))

    def __repr__(self) -> str:
        return f"FontDescriptor({dict(self._attributes)!r})"

    @classmethod
    def with_file(
        cls, path: Union[str, Path], weight: float = 0.0, size: Optional[float] = None
    ) -> "FontDescriptor":
        """Descriptor for a font file at a given weight."""
        attributes: Dict[str, Any] = {
            CONFIG.FONT_URL_ATTRIBUTE: str(path),
            CONFIG.TRAITS_ATTRIBUTE: {CONFIG.WEIGHT_TRAIT: weight},
        }
        if size is not None:
            attributes[CONFIG.FONT_SIZE_ATTRIBUTE] = size
        return cls(attributes)

    @property
    def attributes(self) -> Dict[str, Any]:
        """Copy of the attribute mapping."""
        return copy.deepcopy(dict(self._attributes))

    def object_for_key(self, key: str) -> Any:
        return copy.deepcopy(self._attributes.get(key))

    @property
    def font_path(self) -> Optional[Path]:
        path = self._attributes.get(CONFIG.FONT_URL_ATTRIBUTE)
        return Path(path) if path else None

    @property
    def traits(self) -> Dict[str, Any]:
        traits = self._attributes.get(CONFIG.TRAITS_ATTRIBUTE)
        return dict(traits) if isinstance(traits, Mapping) else {}

    @property
    def feature_settings(self) -> List[Dict[str, Any]]:
        settings = self._attributes.get(CONFIG.FEATURE_SETTINGS_ATTRIBUTE) or []
        return [dict(s) for s in settings]

    def adding_attributes(self, attributes: Mapping[str, Any]) -> "FontDescriptor":
        """
        Copy of this descriptor with attributes added.

        Feature settings are merged with the existing ones; any other key
        replaces the current value.
        """
        new_attributes = self.attributes
        for key, value in attributes.items():
            if key == CONFIG.FEATURE_SETTINGS_ATTRIBUTE:
                if not value and key not in new_attributes:
                    continue
                new_attributes[key] = merge_feature_settings(
                    self.feature_settings, list(value or [])
                )
            else:
                new_attributes[key] = copy.deepcopy(value)
        return FontDescriptor(new_attributes)

    def adding_font_features(self, features: FontFeatures) -> "FontDescriptor":
        """Copy of this descriptor with AAT type/selector settings added."""
        return self.adding_attributes(
            {CONFIG.FEATURE_SETTINGS_ATTRIBUTE: features.feature_settings()}
        )

    def adding_font_attributes(self, attributes: FontAttributes) -> "FontDescriptor":
        """Copy of this descriptor with OpenType tag/value settings added."""
        return self.adding_attributes(attributes.settings())
