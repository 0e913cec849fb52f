"""
Visibility Transaction Tests - Snapshot, Diff, Merge
"""

import pytest

from design_options.tags import TagModel
from design_options.transaction import VisibilityChange, VisibilitySnapshot, VisibilityTransaction


@pytest.fixture
def model():
    return TagModel(["Option Sofa: A", "Option Sofa: B", "Walls"])


class TestVisibilityTransaction:

    def test_commit_reports_only_changed_tags(self, model):
        commits = []
        tx = VisibilityTransaction(lambda: model.tags, on_commit=commits.append)
        a = model.find_tag("Option Sofa: A")

        tx.start("Show Design Option", mergeable=True)
        a.visible = False
        tx.commit()

        assert len(commits) == 1
        change = commits[0]
        assert change.name == "Show Design Option"
        assert change.mergeable is True
        assert change.tags == [a]
        assert change.before.states == {a: True}
        assert change.after.states == {a: False}

    def test_commit_without_changes_reports_nothing(self, model):
        commits = []
        tx = VisibilityTransaction(lambda: model.tags, on_commit=commits.append)

        tx.start("Show Design Option")
        tx.commit()

        assert commits == []
        assert tx.is_open is False

    def test_nested_start_raises(self, model):
        tx = VisibilityTransaction(lambda: model.tags)
        tx.start("Show Design Option")

        with pytest.raises(RuntimeError):
            tx.start("Show Design Option")

    def test_commit_without_start_is_ignored(self, model):
        commits = []
        tx = VisibilityTransaction(lambda: model.tags, on_commit=commits.append)

        tx.commit()

        assert commits == []


class TestVisibilityChange:

    def test_undo_redo_restore_states(self, model):
        before = VisibilitySnapshot.capture(model)
        model.find_tag("Option Sofa: A").visible = False
        after = VisibilitySnapshot.capture(model)
        change = VisibilityChange.between("Show Design Option", True, before, after)

        change.undo()
        assert model.find_tag("Option Sofa: A").visible is True

        change.redo()
        assert model.find_tag("Option Sofa: A").visible is False

    def test_merge_keeps_oldest_before_state(self, model):
        a = model.find_tag("Option Sofa: A")
        b = model.find_tag("Option Sofa: B")

        s0 = VisibilitySnapshot.capture(model)
        b.visible = False
        s1 = VisibilitySnapshot.capture(model)
        a.visible = False
        s2 = VisibilitySnapshot.capture(model)

        first = VisibilityChange.between("Show Design Option", True, s0, s1)
        first.merge(VisibilityChange.between("Show Design Option", True, s1, s2))

        assert first.before.states == {a: True, b: True}
        assert first.after.states == {a: False, b: False}

    def test_merge_back_to_start_is_empty(self, model):
        a = model.find_tag("Option Sofa: A")

        s0 = VisibilitySnapshot.capture(model)
        a.visible = False
        s1 = VisibilitySnapshot.capture(model)
        a.visible = True
        s2 = VisibilitySnapshot.capture(model)

        change = VisibilityChange.between("Show Design Option", True, s0, s1)
        change.merge(VisibilityChange.between("Show Design Option", True, s1, s2))

        assert change.is_empty
