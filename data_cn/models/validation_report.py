# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Aggregated validation results with summary statistics."""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..file_io.template_renderer import TemplateRenderer
from .validation_result import ValidationResult


class ValidationReport:
    """Ordered collection of per-file validation results.

    Results keep the order in which they were added. Counts are derived from
    the results on every access rather than stored.
    """

    def __init__(self, results: Optional[Iterable[ValidationResult]] = None):
        self._results: List[ValidationResult] = list(results) if results is not None else []

    def add_result(self, result: ValidationResult) -> 'ValidationReport':
        self._results.append(result)
        return self

    @property
    def results(self) -> Tuple[ValidationResult, ...]:
        return tuple(self._results)

    @property
    def valid_results(self) -> List[ValidationResult]:
        return [r for r in self._results if r.valid]

    @property
    def invalid_results(self) -> List[ValidationResult]:
        return [r for r in self._results if not r.valid]

    @property
    def valid(self) -> bool:
        return all(r.valid for r in self._results)

    @property
    def total_count(self) -> int:
        return len(self._results)

    @property
    def valid_count(self) -> int:
        return len(self.valid_results)

    @property
    def invalid_count(self) -> int:
        return len(self.invalid_results)

    @property
    def parse_error_count(self) -> int:
        return sum(1 for r in self._results if r.has_parse_error)

    @property
    def schema_error_count(self) -> int:
        return sum(1 for r in self.invalid_results if not r.has_parse_error)

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self):
        return iter(self._results)

    def _template_context(self, verbose: bool) -> Dict[str, Any]:
        return {
            'verbose': verbose,
            'results': self._results,
            'invalid_results': self.invalid_results,
            'total_count': self.total_count,
            'valid_count': self.valid_count,
            'invalid_count': self.invalid_count,
            'parse_error_count': self.parse_error_count,
            'schema_error_count': self.schema_error_count,
        }

    def summary(self) -> str:
        """Render the summary block with total, valid and invalid counts.

        Parse and schema error counts are only listed when nonzero.
        """
        return TemplateRenderer().render_template(
            "validation_summary.txt.jinja2", **self._template_context(verbose=False)
        )

    def render(self, verbose: bool = False) -> str:
        """Render the report as text.

        Args:
            verbose: Also list every result, valid ones included

        Returns:
            Per-file listing (verbose only), the invalid files block when any
            file is invalid, then the summary
        """
        return TemplateRenderer().render_template(
            "validation_report.txt.jinja2", **self._template_context(verbose=verbose)
        )

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'valid': self.valid,
            'total': self.total_count,
            'valid_count': self.valid_count,
            'invalid_count': self.invalid_count,
            'parse_errors': self.parse_error_count,
            'schema_errors': self.schema_error_count,
            'results': [r.to_dict() for r in self._results],
        }
