import pytest

from conftest import muscle_row
from app.core.exceptions import LoadFailure
from app.services.muscle_index import MuscleCorrelationIndex, MuscleRecord, build_index


def test_lookups(index):
    assert index.group_for(12) == "Chest"
    assert index.group_for(20) == "Back"
    assert index.mesh_names_for_group("Chest") == {"pec_major_l", "pec_major_r"}
    assert index.mesh_names_for_muscle_ids([12, 13]) == {"pec_major_l", "pec_major_r"}


def test_multi_head_muscle_maps_to_every_mesh(index):
    assert index.mesh_names_by_muscle_id[20] == {"lat_dorsi_l", "lat_dorsi_r"}


def test_unknown_references_are_empty_not_errors(index):
    assert index.group_for(9999) is None
    assert index.mesh_names_for_group("Tail") == frozenset()
    assert index.mesh_names_for_muscle_ids([9999]) == frozenset()
    assert index.mesh_names_for_muscle_ids([9999, 30]) == {"rectus_abdominis"}


def test_groups_sorted(index):
    assert index.groups == ["Back", "Chest", "Shoulders", "Upper Arms", "Waist"]


def test_record_for_mesh(index):
    record = index.record_for_mesh("pec_major_r")
    assert record.muscle_id == 13
    assert record.unique_head_id == 2
    assert record.chirality == "R"
    assert index.record_for_mesh("nope") is None


def test_one_malformed_row_among_99_valid_rows():
    rows = [muscle_row(i, f"Muscle {i}", "Back", i, i, f"mesh_{i}") for i in range(1, 100)]
    rows.insert(40, ["BadRow", "", "", ""])

    index = build_index(rows)

    assert len(index) == 99
    assert all(index.group_for(i) == "Back" for i in range(1, 100))
    assert len(index.warnings) == 1
    assert index.warnings[0].row == 41
    assert "columns" in index.warnings[0].reason


def test_non_numeric_id_row_is_skipped():
    rows = [muscle_row(1, "A", "Neck", 1, 1, "a"), muscle_row("x", "B", "Neck", 2, 2, "b")]
    index = build_index(rows)
    assert len(index) == 1
    assert "muscle_id" in index.warnings[0].reason


def test_inconsistent_group_keeps_last_and_warns():
    rows = [muscle_row(1, "A", "Neck", 1, 1, "a"), muscle_row(1, "A", "Back", 1, 2, "b")]
    index = build_index(rows)
    assert index.group_for(1) == "Back"
    assert any("mapped to both" in w.reason for w in index.warnings)


def test_empty_source_is_a_load_failure():
    with pytest.raises(LoadFailure):
        build_index([])


def test_source_with_only_bad_rows_is_a_load_failure():
    with pytest.raises(LoadFailure):
        build_index([["BadRow", "", "", ""], ["also", "bad"]])


def test_built_from_records_directly():
    rec = MuscleRecord(
        muscle_id=5, muscle_name="Soleus", muscle_group="Calves",
        head_type_id=50, unique_head_id=9, mesh_reference_name="soleus_l",
    )
    index = MuscleCorrelationIndex([rec])
    assert index.group_for(5) == "Calves"
    assert index.warnings == ()


def test_unique_head_with_two_meshes_warns_and_keeps_both():
    rows = [
        muscle_row(7, "Biceps Brachii", "Upper Arms", 70, 11, "biceps_long_l"),
        muscle_row(7, "Biceps Brachii", "Upper Arms", 70, 11, "biceps_long_l_v2"),
    ]
    index = build_index(rows)
    assert len(index) == 2
    assert [w.reason for w in index.warnings] == [
        "unique head 11 has meshes 'biceps_long_l' and 'biceps_long_l_v2'"
    ]
    assert index.mesh_names_for_muscle_ids([7]) == {"biceps_long_l", "biceps_long_l_v2"}


def test_blank_lines_keep_row_numbers_in_step():
    rows = [muscle_row(1, "A", "Neck", 1, 1, "a"), [], ["BadRow", "", "", ""]]
    index = build_index(rows)
    assert len(index) == 1
    assert [w.row for w in index.warnings] == [3]


def test_blank_lines_only_is_a_load_failure():
    with pytest.raises(LoadFailure):
        build_index([[], ["", " "]])


def test_mesh_names_for_head_type_ids(index):
    assert index.mesh_names_for_head_type_ids([120]) == {"pec_major_l", "pec_major_r"}
    assert index.mesh_names_for_head_type_ids([200, 9999]) == {"lat_dorsi_l", "lat_dorsi_r"}
    # muscle IDs are not head types
    assert index.mesh_names_for_head_type_ids([12]) == frozenset()
