"""
Unit tests for the form validation pipeline.
"""

import pytest

from formcheck.core.models import (
    MandatoryInputData,
    OptionalInputData,
    ProcessResult,
    ValidationError,
)
from formcheck.pipeline import DefaultFormValidation, FormValidationTemplate, MandatoryProcessResult

pytestmark = pytest.mark.unit


def mandatory(field_id: str, text: str, *issues: ValidationError) -> MandatoryInputData:
    return MandatoryInputData(field_id=field_id, input=text, issues=issues)


def optional(field_id: str, text: str) -> OptionalInputData:
    return OptionalInputData(field_id=field_id, input=text)


class TestProcess:
    """Tests for DefaultFormValidation.process()"""

    def test_empty_form_is_valid(self):
        result = DefaultFormValidation().process()
        assert result == ProcessResult(is_valid=True, input_data=[], invalid_fields=[])

    def test_invalid_mandatory_field(self):
        username = mandatory("username", "", ValidationError.IS_EMPTY)
        bio = optional("bio", "hello")

        result = DefaultFormValidation([username, bio]).process()

        assert result.is_valid is False
        assert result.invalid_fields == [("username", (ValidationError.IS_EMPTY,))]
        assert result.input_data == [username, bio]

    def test_all_mandatory_valid(self):
        records = [mandatory("username", "john"), mandatory("password", "Abc12345"), optional("bio", "")]
        result = DefaultFormValidation(records).process()

        assert result.is_valid is True
        assert result.invalid_fields == []
        assert result.input_data == records

    def test_optional_fields_never_validated(self):
        result = DefaultFormValidation([optional("bio", ""), optional("site", "<>")]).process()
        assert result.is_valid is True

    def test_invalid_fields_keep_scan_order(self):
        records = [
            mandatory("c", "", ValidationError.IS_EMPTY),
            optional("x", ""),
            mandatory("a", "ok"),
            mandatory("b", "abc", ValidationError.TOO_SHORT, ValidationError.MISSING_NUMBER),
        ]
        result = DefaultFormValidation(records).process()

        assert [field_id for field_id, _ in result.invalid_fields] == ["c", "b"]
        assert result.invalid_fields[1][1] == (ValidationError.TOO_SHORT, ValidationError.MISSING_NUMBER)

    def test_process_is_repeatable(self):
        pipeline = DefaultFormValidation([mandatory("username", "", ValidationError.IS_EMPTY)])
        assert pipeline.process() == pipeline.process()

    def test_result_invariant(self):
        for records in ([], [mandatory("a", "")], [mandatory("a", "", ValidationError.IS_EMPTY)]):
            result = DefaultFormValidation(records).process()
            assert result.is_valid == (not result.invalid_fields)


class TestStages:
    """Tests for the individual template stages"""

    def test_partitioning_preserves_order(self):
        records = [optional("o1", ""), mandatory("m1", ""), optional("o2", ""), mandatory("m2", "")]
        pipeline = DefaultFormValidation(records)

        assert [r.field_id for r in pipeline.retrieve_mandatory_input_data(records)] == ["m1", "m2"]
        assert [r.field_id for r in pipeline.retrieve_optional_input_data(records)] == ["o1", "o2"]

    def test_process_mandatory_input_data(self):
        pipeline = DefaultFormValidation()
        processed = pipeline.process_mandatory_input_data([
            mandatory("a", ""),
            mandatory("b", "", ValidationError.IS_EMPTY),
        ])
        assert processed == MandatoryProcessResult(
            is_valid=False,
            invalid_fields=[("b", (ValidationError.IS_EMPTY,))],
        )

    def test_stages_run_in_order(self):
        calls = []

        class RecordingValidation(FormValidationTemplate):
            def get_input_data(self):
                calls.append("fetch")
                return [mandatory("a", "")]

            def retrieve_mandatory_input_data(self, input_data):
                calls.append("mandatory")
                return super().retrieve_mandatory_input_data(input_data)

            def retrieve_optional_input_data(self, input_data):
                calls.append("optional")
                return super().retrieve_optional_input_data(input_data)

            def process_mandatory_input_data(self, mandatory_input_data):
                calls.append("evaluate")
                return super().process_mandatory_input_data(mandatory_input_data)

            def map_to_result(self, input_data, processed_mandatory_input_data):
                calls.append("assemble")
                return super().map_to_result(input_data, processed_mandatory_input_data)

        result = RecordingValidation().process()

        assert calls == ["fetch", "mandatory", "optional", "evaluate", "assemble"]
        assert result.is_valid is True

    def test_template_requires_get_input_data(self):
        with pytest.raises(TypeError):
            FormValidationTemplate()


class TestHeldSet:
    """Tests for update/remove/reset on the held records"""

    def test_update_existing_replaces_in_place(self):
        pipeline = DefaultFormValidation([optional("a", "1"), optional("b", "2"), optional("c", "3")])
        replacement = mandatory("b", "", ValidationError.IS_EMPTY)

        pipeline.update_input_data(replacement)

        records = pipeline.get_input_data()
        assert len(records) == 3
        assert records[1] == replacement
        assert [r.field_id for r in records] == ["a", "b", "c"]

    def test_update_new_appends(self):
        pipeline = DefaultFormValidation([optional("a", "1")])
        record = optional("z", "2")

        pipeline.update_input_data(record)

        records = pipeline.get_input_data()
        assert len(records) == 2
        assert records[-1] == record

    def test_update_does_not_revalidate(self):
        pipeline = DefaultFormValidation([mandatory("username", "", ValidationError.IS_EMPTY)])
        before = pipeline.process()

        pipeline.update_input_data(mandatory("username", "john"))

        assert before.is_valid is False
        assert pipeline.process().is_valid is True

    def test_remove(self):
        pipeline = DefaultFormValidation([optional("a", "1"), optional("b", "2")])
        pipeline.remove_input_data("a")

        assert [r.field_id for r in pipeline.get_input_data()] == ["b"]
        assert "a" not in pipeline

    def test_remove_missing_is_noop(self):
        pipeline = DefaultFormValidation([optional("a", "1")])
        pipeline.remove_input_data("missing")
        assert len(pipeline) == 1

    def test_set_input_data_replaces_everything(self):
        pipeline = DefaultFormValidation([optional("a", "1")])
        pipeline.set_input_data([optional("b", "2"), optional("c", "3")])
        assert [r.field_id for r in pipeline.get_input_data()] == ["b", "c"]

    def test_duplicate_ids_in_initial_set_collapse(self):
        pipeline = DefaultFormValidation([optional("a", "1"), optional("b", "2"), optional("a", "3")])
        assert [(r.field_id, r.input) for r in pipeline.get_input_data()] == [("a", "3"), ("b", "2")]

    def test_reset(self):
        pipeline = DefaultFormValidation([mandatory("a", "", ValidationError.IS_EMPTY)])
        pipeline.reset()

        assert len(pipeline) == 0
        assert pipeline.process().is_valid is True

    def test_get_input_data_returns_a_copy(self):
        pipeline = DefaultFormValidation([optional("a", "1")])
        pipeline.get_input_data().clear()
        assert len(pipeline) == 1
