"""
Form validation pipeline.

Coordinates the flow: fetch -> partition mandatory -> partition optional ->
evaluate mandatory -> assemble result
"""

from abc import ABC, abstractmethod
from typing import NamedTuple

from formcheck.core.models import (
    InputData,
    InvalidField,
    MandatoryInputData,
    OptionalInputData,
    ProcessResult,
)
from formcheck.observability.logger import get_logger, log_operation
from formcheck.observability.metrics import record_process_run

logger = get_logger(__name__)


class MandatoryProcessResult(NamedTuple):
    """Partial outcome of evaluating the mandatory records."""

    is_valid: bool
    invalid_fields: list[InvalidField]


class FormValidationTemplate(ABC):
    """
    Template for processing a form.

    Flow:
    1. Fetch the held input records
    2. Select mandatory records
    3. Select optional records
    4. Evaluate mandatory records (issues are already on each record)
    5. Assemble the ProcessResult

    Subclasses supply the records; every stage can be overridden, but
    process() always runs all five in this order.
    """

    @abstractmethod
    def get_input_data(self) -> list[InputData]:
        """Return the records to process, in form order."""
        pass

    def retrieve_mandatory_input_data(self, input_data: list[InputData]) -> list[MandatoryInputData]:
        return [record for record in input_data if isinstance(record, MandatoryInputData)]

    def retrieve_optional_input_data(self, input_data: list[InputData]) -> list[OptionalInputData]:
        return [record for record in input_data if isinstance(record, OptionalInputData)]

    def process_mandatory_input_data(
        self, mandatory_input_data: list[MandatoryInputData]
    ) -> MandatoryProcessResult:
        """
        Select the mandatory records that carry issues.

        Args:
            mandatory_input_data: Mandatory records in scan order

        Returns:
            MandatoryProcessResult with overall validity and the
            (field_id, issues) pairs of invalid fields
        """
        invalid_fields = [
            (record.field_id, record.issues)
            for record in mandatory_input_data
            if not record.is_valid
        ]
        return MandatoryProcessResult(is_valid=not invalid_fields, invalid_fields=invalid_fields)

    def map_to_result(
        self,
        input_data: list[InputData],
        processed_mandatory_input_data: MandatoryProcessResult,
    ) -> ProcessResult:
        return ProcessResult(
            is_valid=processed_mandatory_input_data.is_valid,
            input_data=input_data,
            invalid_fields=processed_mandatory_input_data.invalid_fields,
        )

    def process(self) -> ProcessResult:
        """
        Run the whole pipeline.

        Returns:
            ProcessResult for the current records; validation failures are
            reported as data, never raised
        """
        input_data = self.get_input_data()

        with log_operation("Processing form", logger=logger, field_count=len(input_data)) as op:
            mandatory_input_data = self.retrieve_mandatory_input_data(input_data)
            optional_input_data = self.retrieve_optional_input_data(input_data)
            processed = self.process_mandatory_input_data(mandatory_input_data)
            result = self.map_to_result(input_data, processed)

            logger.info(
                f"Form processed: {len(mandatory_input_data)} mandatory, "
                f"{len(optional_input_data)} optional, {len(result.invalid_fields)} invalid",
                extra={
                    "mandatory_count": len(mandatory_input_data),
                    "optional_count": len(optional_input_data),
                    "invalid_fields": [field_id for field_id, _ in result.invalid_fields],
                    "is_valid": result.is_valid,
                },
            )

        record_process_run(
            is_valid=result.is_valid,
            reasons=[issue.value for _, issues in result.invalid_fields for issue in issues],
            duration_seconds=op.elapsed,
        )
        return result


class DefaultFormValidation(FormValidationTemplate):
    """
    Form validation holding its records in memory, keyed by field id.

    The held set keeps insertion order. Mutations never re-run validation;
    call process() to observe them. One owner per instance: concurrent
    writers must synchronize externally.
    """

    def __init__(self, input_data: list[InputData] | None = None):
        """
        Initialize pipeline.

        Args:
            input_data: Initial records (later duplicates of a field id
                        replace earlier ones in place)
        """
        self._input_data: dict[str, InputData] = {}
        if input_data:
            self.set_input_data(input_data)

    def get_input_data(self) -> list[InputData]:
        return list(self._input_data.values())

    def set_input_data(self, input_data: list[InputData]) -> None:
        """Replace the whole held set."""
        self._input_data = {}
        for record in input_data:
            self.update_input_data(record)

    def update_input_data(self, record: InputData) -> None:
        """
        Replace the record with the same field id in place, or append it.

        Args:
            record: Record to store
        """
        # Assigning to an existing key keeps its position in the dict
        self._input_data[record.field_id] = record

    def remove_input_data(self, field_id: str) -> None:
        """Drop the record with field_id; no-op if absent."""
        self._input_data.pop(field_id, None)

    def reset(self) -> None:
        self._input_data.clear()

    def __len__(self) -> int:
        return len(self._input_data)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._input_data
