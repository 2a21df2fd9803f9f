"""Classification rules for exported asset files.

The rule table is the single source of truth for how a file becomes a
manifest entry: which extensions are recognized, which folder markers pick
between kinds that share an extension, how the output path is derived and
which companion sections are attached. Adding a kind means adding a rule.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

PACKAGED_EXTENSION = ".rpak"

# Order in which entry groups appear in the manifest's ``files`` list.
DEFAULT_GROUP_ORDER: tuple[str, ...] = (
    "stlt",
    "stgs",
    "dtbl",
    "shds",
    "txan",
    "txtr",
    "matl",
    "arig",
    "mdl_",
)


class KindCode(str, Enum):
    """Asset type codes understood by the packer."""

    SETTINGS_LAYOUT = "stlt"
    SETTINGS = "stgs"
    DATATABLE = "dtbl"
    SHADERSET = "shds"
    SHADER = "shdr"
    TEXTURE_ANIM = "txan"
    TEXTURE = "txtr"
    MATERIAL = "matl"
    ANIM_RIG = "arig"
    MODEL = "mdl_"


class MarkerScope(str, Enum):
    """What part of the root-relative path a folder marker is tested against."""

    FOLDER = "folder"  # immediate containing folder name
    DIRECTORY = "directory"  # containing directory path, with trailing "/"
    PATH = "path"  # full relative file path


class OutputLayout(str, Enum):
    """How the packaged output path is derived."""

    REWRITE = "rewrite"  # relative path, extension rewritten to .rpak
    PREFIXED = "prefixed"  # <prefix>/<stem>.rpak, guid attached
    RAW = "raw"  # relative path unchanged


@dataclass(frozen=True, slots=True)
class SubListSpec:
    """Companion section attached to an entry as a named sub-list."""

    section: str
    name: str


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    """Maps (extension, folder marker) to a manifest entry shape."""

    label: str
    extensions: tuple[str, ...]
    kind: KindCode
    group: str
    layout: OutputLayout
    marker: str | None = None
    scope: MarkerScope = MarkerScope.FOLDER
    strip_segment: str | None = None
    prefix: str | None = None
    recheck_output: bool = False
    sub_lists: tuple[SubListSpec, ...] = ()
    notify_empty_companion: bool = False

    def matches_extension(self, extension: str) -> bool:
        return extension.lower() in self.extensions

    def matches_location(self, relative: str, directory: str, folder: str) -> bool:
        """Check the folder marker against the scoped part of the path.

        Args:
            relative: Root-relative file path.
            directory: Root-relative directory of the file.
            folder: Immediate containing folder name.
        """
        if self.marker is None:
            return True

        marker = self.marker.casefold()
        if self.scope is MarkerScope.FOLDER:
            return marker in folder.casefold()
        if self.scope is MarkerScope.DIRECTORY:
            return marker in f"{directory}/".casefold()
        return marker in relative.casefold()


@dataclass(frozen=True)
class RuleTable:
    """Ordered classification rules.

    Rules sharing an extension are tried in table order; the first whose
    marker matches wins. Extensions listed in `warn_unmatched` log a warning
    when no rule's marker matches; others are dropped silently.
    """

    rules: tuple[ClassificationRule, ...]
    warn_unmatched: frozenset[str] = frozenset()

    def for_extension(self, extension: str) -> list[ClassificationRule]:
        ext = extension.lower()
        return [rule for rule in self.rules if ext in rule.extensions]

    def select(
        self,
        extension: str,
        relative: str,
        directory: str,
        folder: str,
    ) -> ClassificationRule | None:
        """Return the first rule matching the file, if any."""
        for rule in self.for_extension(extension):
            if rule.matches_location(relative, directory, folder):
                return rule
        return None

    @property
    def extensions(self) -> frozenset[str]:
        return frozenset(ext for rule in self.rules for ext in rule.extensions)

    @property
    def groups(self) -> tuple[str, ...]:
        seen: dict[str, None] = {}
        for rule in self.rules:
            seen.setdefault(rule.group, None)
        return tuple(seen)

    def with_rules(self, rules: Iterable[ClassificationRule]) -> RuleTable:
        """Return a table with `rules` appended after the existing ones."""
        return RuleTable(rules=(*self.rules, *rules), warn_unmatched=self.warn_unmatched)


DEFAULT_RULES = RuleTable(
    rules=(
        ClassificationRule(
            label="datatable",
            extensions=(".csv",),
            kind=KindCode.DATATABLE,
            group="dtbl",
            layout=OutputLayout.REWRITE,
            marker="datatable",
            scope=MarkerScope.FOLDER,
            strip_segment="dtbl",
        ),
        ClassificationRule(
            label="shaderset",
            extensions=(".msw",),
            kind=KindCode.SHADERSET,
            group="shds",
            layout=OutputLayout.PREFIXED,
            marker="shaderset",
            scope=MarkerScope.DIRECTORY,
            prefix="shaderset",
        ),
        ClassificationRule(
            label="shader",
            extensions=(".msw",),
            kind=KindCode.SHADER,
            group="shds",
            layout=OutputLayout.PREFIXED,
            marker="shader",
            scope=MarkerScope.DIRECTORY,
            prefix="shader",
        ),
        ClassificationRule(
            label="texture animation",
            extensions=(".txan",),
            kind=KindCode.TEXTURE_ANIM,
            group="txan",
            layout=OutputLayout.PREFIXED,
            prefix="texture_anim",
        ),
        ClassificationRule(
            label="texture",
            extensions=(".dds",),
            kind=KindCode.TEXTURE,
            group="txtr",
            layout=OutputLayout.PREFIXED,
            prefix="texture",
        ),
        ClassificationRule(
            label="settings layout",
            extensions=(".json",),
            kind=KindCode.SETTINGS_LAYOUT,
            group="stlt",
            layout=OutputLayout.REWRITE,
            marker="settings_layout",
            scope=MarkerScope.DIRECTORY,
            strip_segment="stlt",
        ),
        ClassificationRule(
            label="settings",
            extensions=(".json",),
            kind=KindCode.SETTINGS,
            group="stgs",
            layout=OutputLayout.REWRITE,
            marker="settings/",
            scope=MarkerScope.DIRECTORY,
            strip_segment="stgs",
        ),
        ClassificationRule(
            label="material",
            extensions=(".json",),
            kind=KindCode.MATERIAL,
            group="matl",
            layout=OutputLayout.REWRITE,
            marker="material",
            scope=MarkerScope.PATH,
            recheck_output=True,
        ),
        ClassificationRule(
            label="animation rig",
            extensions=(".rrig",),
            kind=KindCode.ANIM_RIG,
            group="arig",
            layout=OutputLayout.RAW,
            sub_lists=(SubListSpec(section="seqs", name="sequences"),),
        ),
        ClassificationRule(
            label="model",
            extensions=(".rmdl", ".mdl"),
            kind=KindCode.MODEL,
            group="mdl_",
            layout=OutputLayout.RAW,
            recheck_output=True,
            sub_lists=(
                SubListSpec(section="rigs", name="animrigs"),
                SubListSpec(section="seqs", name="sequences"),
            ),
            notify_empty_companion=True,
        ),
    ),
    warn_unmatched=frozenset({".msw"}),
)
