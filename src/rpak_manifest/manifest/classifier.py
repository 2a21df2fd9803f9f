"""Asset classification.

Turns one exported file into a typed manifest entry by applying the rule
table: skip-list check, extension and folder-marker dispatch, output path
derivation and companion-file enrichment.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

from rpak_manifest.manifest.model import ManifestEntry
from rpak_manifest.manifest.rules import (
    DEFAULT_RULES,
    PACKAGED_EXTENSION,
    ClassificationRule,
    OutputLayout,
    RuleTable,
)
from rpak_manifest.paths import (
    parent_directory,
    parent_folder_name,
    relative_path,
    replace_extension,
    strip_leading_segment,
)
from rpak_manifest.rson import (
    COMPANION_EXTENSION,
    companion_path,
    extract_section,
    read_companion,
)
from rpak_manifest.skiplist import SkipSet

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class ClassifiedAsset:
    """A manifest entry together with the group it belongs to."""

    group: str
    entry: ManifestEntry
    rule: ClassificationRule


class AssetClassifier:
    """Classifies exported asset files into manifest entries.

    Example:
        >>> classifier = AssetClassifier(Path("/export"))
        >>> result = classifier.classify(Path("/export/texture/rifle_col.dds"))
        >>> result.entry.output_path
        'texture/rifle_col.rpak'
    """

    def __init__(
        self,
        root_path: Path,
        *,
        skip_set: SkipSet | None = None,
        rules: RuleTable = DEFAULT_RULES,
        log: Any = None,
        packaged_extension: str = PACKAGED_EXTENSION,
        companion_extension: str = COMPANION_EXTENSION,
    ) -> None:
        """Initialize the classifier.

        Args:
            root_path: Scan root; output paths are relative to it.
            skip_set: Already packaged assets to exclude.
            rules: Classification rule table.
            log: Bound logger for diagnostics (module logger by default).
            packaged_extension: Extension of packaged assets.
            companion_extension: Extension of rig/model companion files.
        """
        self.root_path = root_path
        self.skip_set = skip_set or SkipSet()
        self.rules = rules
        self.log = log or logger
        self.packaged_extension = packaged_extension
        self.companion_extension = companion_extension

    def classify(self, file_path: Path) -> ClassifiedAsset | None:
        """Classify one file.

        Failures are logged and reported as "no entry" so a single bad file
        never aborts a scan.

        Args:
            file_path: File under the scan root.

        Returns:
            The classified asset, or None when the file is skipped,
            unrecognized or could not be processed.
        """
        try:
            return self._classify(file_path)
        except Exception as e:
            self.log.error("asset_processing_failed", path=str(file_path), error=str(e))
            return None

    def _classify(self, file_path: Path) -> ClassifiedAsset | None:
        relative = relative_path(file_path, self.root_path)

        skipped = self.skip_set.match((file_path.name, file_path.stem, relative))
        if skipped is not None:
            self.log.info("skipped_known_asset", asset=skipped)
            return None

        extension = file_path.suffix.lower()
        if extension not in self.rules.extensions:
            return None

        rule = self.rules.select(
            extension,
            relative,
            parent_directory(relative),
            parent_folder_name(relative),
        )
        if rule is None:
            if extension in self.rules.warn_unmatched:
                self.log.warning("unsupported_asset_folder", path=relative)
            return None

        output_path = self._output_path(rule, relative, file_path.stem)
        if rule.recheck_output:
            skipped = self.skip_set.match((output_path,))
            if skipped is not None:
                self.log.info("skipped_known_asset", asset=skipped)
                return None

        guid = file_path.stem if rule.layout is OutputLayout.PREFIXED else None
        sub_lists = self._read_sub_lists(rule, file_path) if rule.sub_lists else {}

        entry = ManifestEntry(
            kind=rule.kind.value,
            output_path=output_path,
            guid=guid,
            sub_lists=sub_lists,
        )
        self.log.info("asset_processed", kind=entry.kind, asset=rule.label, path=output_path)
        return ClassifiedAsset(group=rule.group, entry=entry, rule=rule)

    def _output_path(self, rule: ClassificationRule, relative: str, stem: str) -> str:
        if rule.layout is OutputLayout.PREFIXED:
            return f"{rule.prefix}/{stem}{self.packaged_extension}"
        if rule.layout is OutputLayout.RAW:
            return relative

        path = relative
        if rule.strip_segment:
            path = strip_leading_segment(path, rule.strip_segment)
        return replace_extension(path, self.packaged_extension)

    def _read_sub_lists(
        self,
        rule: ClassificationRule,
        file_path: Path,
    ) -> dict[str, list[str]]:
        """Extract the rule's companion sections that have items."""
        companion = companion_path(file_path, self.companion_extension)
        lines = read_companion(companion)
        if lines is None:
            return {}

        companion_relative = relative_path(companion, self.root_path)
        self.log.info("companion_file_found", asset=rule.label, path=companion_relative)

        sub_lists: dict[str, list[str]] = {}
        for spec in rule.sub_lists:
            items = extract_section(lines, spec.section)
            if items:
                sub_lists[spec.name] = items
                self.log.info(
                    "companion_section_extracted",
                    section=spec.name,
                    items=", ".join(items),
                )

        if not sub_lists and rule.notify_empty_companion:
            self.log.info("companion_file_empty", path=companion_relative)
        return sub_lists
