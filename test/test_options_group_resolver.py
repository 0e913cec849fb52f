"""
Resolver Tests - Tag-Namen -> OptionsGroup

Namenskonvention "Option <Gruppe>: <Option>", Sortierung nach Tag-Namen,
Geschwister-Suche mit escaptem Gruppen-Namen.
"""

import pytest

from config.feature_flags import set_flag
from design_options.options_group import OptionsGroup
from design_options.resolver import resolve_options_group, sibling_pattern
from design_options.tags import Tag, TagModel


class TestResolveFireplace:
    """Das Kamin-Beispiel aus der Doku."""

    def test_resolve_scandi_yields_sorted_group(self, fireplace_tags):
        tag = fireplace_tags.find_tag("Option Fireplace: Scandi")

        group = resolve_options_group(tag, fireplace_tags.tags)

        assert isinstance(group, OptionsGroup)
        assert group.name == "Fireplace"
        assert group.option_names == ["Farmhouse", "Scandi", "Victorian"]
        assert group.index == 1
        assert group.selected_name == "Scandi"

    def test_entities_sorted_by_tag_name(self, fireplace_tags):
        tag = fireplace_tags.find_tag("Option Fireplace: Victorian")

        group = resolve_options_group(tag, fireplace_tags.tags)

        names = [t.name for t in group.option_entities]
        assert names == sorted(names)
        assert group.size == 3
        assert group.option_entities[group.index] is tag

    def test_any_member_resolves_same_group(self, fireplace_tags):
        """Jedes Mitglied liefert Gruppengröße = Anzahl Geschwister."""
        for tag in fireplace_tags:
            group = resolve_options_group(tag, fireplace_tags.tags)
            assert group.size == 3
            assert len(group.option_names) == len(group.option_entities)
            assert group.option_entities[group.index] is tag


class TestResolveAbsent:
    """Kein Match / zu kleine Gruppe -> None, nie eine Exception."""

    def test_plain_name_returns_none(self):
        model = TagModel(["Fireplace", "Option Fireplace: Scandi", "Option Fireplace: Rustic"])

        assert resolve_options_group(model.find_tag("Fireplace"), model.tags) is None

    def test_singleton_group_returns_none(self):
        model = TagModel(["Option Lamp: Arc", "Option Fireplace: Scandi", "Walls"])

        assert resolve_options_group(model.find_tag("Option Lamp: Arc"), model.tags) is None

    def test_empty_option_name_not_matched(self):
        model = TagModel(["Option Sofa:", "Option Sofa: B"])

        assert resolve_options_group(model.find_tag("Option Sofa:"), model.tags) is None


class TestUnanchoredMatch:
    """Die Namenskonvention darf irgendwo im Tag-Namen stehen."""

    def test_leading_text_still_forms_group(self):
        model = TagModel(["Old Option Sofa: A", "Old Option Sofa: B"])

        group = resolve_options_group(model.find_tag("Old Option Sofa: A"), model.tags)

        assert group is not None
        assert group.name == "Sofa"
        assert group.option_names == ["A", "B"]
        assert group.index == 0

    def test_prefixed_and_plain_tags_are_siblings(self):
        model = TagModel(["Option Sofa: Modern", "Archive Option Sofa: Retro"])

        group = resolve_options_group(model.find_tag("Option Sofa: Modern"), model.tags)

        assert group.size == 2
        assert group.option_names == ["Retro", "Modern"]
        assert group.selected_name == "Modern"


class TestSeparatorAsymmetry:
    """Outer-Match tolerant, Geschwister-Suche verlangt ": "."""

    def test_missing_space_tag_not_member_of_strict_siblings(self):
        model = TagModel(["Option Sofa:Modern", "Option Sofa: Classic", "Option Sofa: Retro"])

        assert resolve_options_group(model.find_tag("Option Sofa:Modern"), model.tags) is None

    def test_missing_space_tag_excluded_from_group(self):
        model = TagModel(["Option Sofa:Modern", "Option Sofa: Classic", "Option Sofa: Retro"])

        group = resolve_options_group(model.find_tag("Option Sofa: Classic"), model.tags)

        assert group.option_names == ["Classic", "Retro"]

    def test_lenient_flag_includes_missing_space_tag(self):
        set_flag("lenient_sibling_separator", True)
        model = TagModel(["Option Sofa:Modern", "Option Sofa: Classic", "Option Sofa: Retro"])

        group = resolve_options_group(model.find_tag("Option Sofa:Modern"), model.tags)

        assert group is not None
        assert group.size == 3
        assert group.selected_name == "Modern"


class TestGroupNameEscaping:
    """Regex-Steuerzeichen im Gruppen-Namen matchen wörtlich."""

    def test_plus_in_group_name(self):
        model = TagModel(["Option A+B: x", "Option A+B: y", "Option AAB: z"])

        group = resolve_options_group(model.find_tag("Option A+B: y"), model.tags)

        assert group.name == "A+B"
        assert group.option_names == ["x", "y"]
        assert group.index == 1

    def test_parentheses_in_group_name(self):
        model = TagModel(["Option Lamp (old): Arc", "Option Lamp (old): Floor"])

        group = resolve_options_group(model.find_tag("Option Lamp (old): Floor"), model.tags)

        assert group.name == "Lamp (old)"
        assert group.selected_name == "Floor"

    def test_sibling_pattern_does_not_match_longer_group(self):
        pattern = sibling_pattern("Fire")

        assert pattern.search("Option Fire: Gas")
        assert not pattern.search("Option Fireplace: Scandi")


class TestDuplicateNames:
    """Gleiche Namen behalten die Entdeckungs-Reihenfolge."""

    def test_ties_ordered_by_discovery(self):
        first = Tag("Option Door: Oak")
        second = Tag("Option Door: Oak")
        other = Tag("Option Door: Ash")

        group = resolve_options_group(second, [first, second, other])

        assert group.option_entities == [other, first, second]
        assert group.index == 2


def test_tag_model_rejects_duplicate_names():
    model = TagModel(["Walls"])

    with pytest.raises(ValueError):
        model.add_tag("Walls")
