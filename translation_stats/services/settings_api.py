"""Declarative registry of settings sections and fields.

Sections group fields on a settings page; fields carry everything needed to
render a form control and to read, default and sanitize its value inside the
settings blob. A field's ``path`` locates its value in the blob, e.g.
``("settings", "show_warnings")`` or ``("plugins", "akismet", "enabled")``.
"""

import copy
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

logger = logging.getLogger(__name__)

FieldType = Literal["checkbox", "select", "number", "hidden"]

_TRUTHY = {"1", "true", "on", "yes"}


@dataclass(frozen=True)
class SelectOption:
    value: str
    label: str


@dataclass
class SettingsField:
    """A single form control bound to one value of the settings blob."""

    section: str
    path: tuple[str, ...]
    type: FieldType
    title: str = ""
    label: str = ""
    description: str = ""
    helper: str = ""
    css_class: str = ""
    default: Any = None
    select_options: list[SelectOption] = field(default_factory=list)
    min_value: int | None = None

    @property
    def id(self) -> str:
        return self.path[-1]

    @property
    def input_name(self) -> str:
        """Form input name, e.g. ``settings[show_warnings]``."""
        head, *rest = self.path
        return head + "".join(f"[{part}]" for part in rest)

    @property
    def input_id(self) -> str:
        return "tstats_" + "__".join(self.path)

    def sanitize(self, raw: str | None, current: Any) -> Any:
        """Convert a posted form value into the stored value.

        Unchecked checkboxes are absent from a form post and become ``False``.
        Values that fail validation keep *current*.
        """
        if self.type == "checkbox":
            return raw is not None and raw.strip().lower() in _TRUTHY

        if raw is None:
            return current

        if self.type == "select":
            allowed = {str(option.value) for option in self.select_options}
            if raw not in allowed:
                logger.warning("Rejected value %r for select field %s", raw, self.input_name)
                return current
            # Select options of numeric fields are posted as strings.
            return int(raw) if isinstance(self.default, int) else raw

        if self.type == "number":
            try:
                value = int(raw)
            except ValueError:
                logger.warning("Rejected value %r for number field %s", raw, self.input_name)
                return current
            if self.min_value is not None and value < self.min_value:
                return current
            return value

        return raw.strip()


@dataclass
class SettingsSection:
    """A titled group of fields displayed on a settings page."""

    id: str
    title: str
    page: str
    description: str = ""
    fields: list[SettingsField] = field(default_factory=list)


def get_path(blob: Mapping[str, Any], path: tuple[str, ...], default: Any = None) -> Any:
    """Read the value at *path*, or *default* if any segment is missing."""
    node: Any = blob
    for part in path:
        if not isinstance(node, Mapping) or part not in node:
            return default
        node = node[part]
    return node


def set_path(blob: dict[str, Any], path: tuple[str, ...], value: Any) -> None:
    """Write *value* at *path*, creating intermediate mappings as needed."""
    node = blob
    for part in path[:-1]:
        child = node.get(part)
        if not isinstance(child, dict):
            child = {}
            node[part] = child
        node = child
    node[path[-1]] = value


class SettingsRegistry:
    """Holds the sections, fields and option bindings of the settings screen."""

    def __init__(self) -> None:
        self._sections: dict[str, SettingsSection] = {}
        self._settings: dict[str, str] = {}

    def add_section(
        self, section_id: str, title: str, page: str, description: str = ""
    ) -> SettingsSection:
        section = SettingsSection(id=section_id, title=title, page=page, description=description)
        self._sections[section_id] = section
        return section

    def register_setting(self, page: str, option_name: str) -> None:
        """Bind *page*'s form fields to the option they are saved into."""
        self._settings[page] = option_name

    def option_for(self, page: str) -> str | None:
        return self._settings.get(page)

    def add_field(self, settings_field: SettingsField) -> SettingsField:
        try:
            section = self._sections[settings_field.section]
        except KeyError:
            raise KeyError(f"Unknown settings section '{settings_field.section}'") from None
        section.fields.append(settings_field)
        return settings_field

    def section(self, section_id: str) -> SettingsSection:
        return self._sections[section_id]

    def sections_for(self, page: str) -> list[SettingsSection]:
        return [s for s in self._sections.values() if s.page == page]

    def fields(self) -> Iterator[SettingsField]:
        for section in self._sections.values():
            yield from section.fields

    def defaults(self, root: str) -> dict[str, Any]:
        """Default values of every field stored under the *root* path."""
        values: dict[str, Any] = {}
        for settings_field in self.fields():
            if settings_field.path[0] == root and settings_field.default is not None:
                set_path(values, settings_field.path[1:], copy.deepcopy(settings_field.default))
        return values
