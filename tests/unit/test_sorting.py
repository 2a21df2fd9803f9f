"""Tests for material priority ordering."""
from __future__ import annotations

PLAIN_TAGS = ("shadow", "prepass", "vsm", "tightshadow", "colpass")


class TestPriorityIndex:
    """Tests for priority_index."""

    def test_first_tag_in_list_order_wins(self) -> None:
        """The lowest tag index found in the path is used."""
        from rpak_manifest.manifest.sorting import priority_index

        assert priority_index("material/x_colpass_shadow.rpak", PLAIN_TAGS) == 0
        assert priority_index("material/x_colpass.rpak", PLAIN_TAGS) == 4

    def test_untagged_sorts_last(self) -> None:
        """Paths without a tag get len(tags)."""
        from rpak_manifest.manifest.sorting import priority_index

        assert priority_index("material/wall.rpak", PLAIN_TAGS) == len(PLAIN_TAGS)

    def test_case_insensitive(self) -> None:
        """Tag search ignores case."""
        from rpak_manifest.manifest.sorting import priority_index

        assert priority_index("material/WALL_PREPASS_A.rpak") == 1

    def test_default_tags_distinguish_tightshadow(self) -> None:
        """Default tags are delimited so tightshadow is not a shadow match."""
        from rpak_manifest.manifest.sorting import DEFAULT_PRIORITY_TAGS, priority_index

        assert DEFAULT_PRIORITY_TAGS[0] == "_shadow_"
        assert priority_index("material/rock_tightshadow_x.rpak") == 3
        assert priority_index("material/rock_shadow_x.rpak") == 0


class TestSortPaths:
    """Tests for full ordering."""

    def test_documented_example(self) -> None:
        """Tagged paths first in tag order, then untagged."""
        from rpak_manifest.manifest.sorting import sort_paths

        result = sort_paths(["b/colpass.rpak", "a/shadow.rpak", "z/none.rpak"], PLAIN_TAGS)

        assert result == ["a/shadow.rpak", "b/colpass.rpak", "z/none.rpak"]

    def test_shadow_before_prepass_before_untagged(self) -> None:
        """Tag order dominates lexical order."""
        from rpak_manifest.manifest.sorting import sort_paths

        paths = [
            "a/none.rpak",
            "b/x_prepass_y.rpak",
            "c/x_shadow_y.rpak",
        ]

        assert sort_paths(paths) == [
            "c/x_shadow_y.rpak",
            "b/x_prepass_y.rpak",
            "a/none.rpak",
        ]

    def test_untagged_lexical_case_insensitive(self) -> None:
        """Ties break on case-insensitive path order."""
        from rpak_manifest.manifest.sorting import sort_paths

        assert sort_paths(["B.rpak", "a.rpak", "C.rpak"]) == ["a.rpak", "B.rpak", "C.rpak"]

    def test_underscore_sorts_after_letters(self) -> None:
        """Paths compare upper-cased, so '_' follows letters."""
        from rpak_manifest.manifest.sorting import sort_paths

        paths = ["material/rifle_sknp.rpak", "material/riflescope_sknp.rpak"]

        assert sort_paths(paths) == [
            "material/riflescope_sknp.rpak",
            "material/rifle_sknp.rpak",
        ]


class TestSortMaterialEntries:
    """Tests for in-place entry sorting."""

    def test_sorts_in_place(self) -> None:
        """Entries are reordered in the given list."""
        from rpak_manifest.manifest.model import ManifestEntry
        from rpak_manifest.manifest.sorting import sort_material_entries

        entries = [
            ManifestEntry("matl", "material/wall.rpak"),
            ManifestEntry("matl", "material/wall_colpass_.rpak"),
            ManifestEntry("matl", "material/Floor.rpak"),
            ManifestEntry("matl", "material/wall_shadow_.rpak"),
        ]

        sort_material_entries(entries)

        assert [e.output_path for e in entries] == [
            "material/wall_shadow_.rpak",
            "material/wall_colpass_.rpak",
            "material/Floor.rpak",
            "material/wall.rpak",
        ]

    def test_sort_independent_of_input_order(self) -> None:
        """Any permutation sorts to the same order."""
        from rpak_manifest.manifest.model import ManifestEntry
        from rpak_manifest.manifest.sorting import sort_material_entries

        paths = ["m/a_vsm_.rpak", "m/b.rpak", "m/A.rpak", "m/c_prepass_.rpak"]
        forward = [ManifestEntry("matl", p) for p in paths]
        backward = [ManifestEntry("matl", p) for p in reversed(paths)]

        sort_material_entries(forward)
        sort_material_entries(backward)

        assert forward == backward
