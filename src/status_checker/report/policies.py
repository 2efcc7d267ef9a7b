"""
Selection policies for scan reports.

Each policy decides which probe records a report retains and which counter a
record is tallied under. Every record is counted in at most one category, and
every retained record is counted in exactly one.
"""

from typing import Dict, Optional, Tuple, Type

from status_checker.contracts import SelectionPolicy
from status_checker.domain import Outcome, SelectionPolicyName, Success


def _status_code(outcome: Outcome) -> Optional[int]:
    """
    Returns the HTTP status code of an outcome, or None for error outcomes.
    """
    if isinstance(outcome, Success):
        return outcome.code
    return None


class Status200And403Policy(SelectionPolicy):
    """
    Retains only 200 and 403 responses.

    Every other outcome is checked but neither retained nor counted.
    """

    SUCCESSFUL_200 = "successful_200"
    FORBIDDEN_403 = "forbidden_403"

    @property
    def name(self) -> SelectionPolicyName:
        return SelectionPolicyName.STATUS_200_403

    @property
    def categories(self) -> Tuple[str, ...]:
        return (self.SUCCESSFUL_200, self.FORBIDDEN_403)

    def categorize(self, outcome: Outcome) -> Optional[str]:
        code = _status_code(outcome)
        if code == 200:
            return self.SUCCESSFUL_200
        if code == 403:
            return self.FORBIDDEN_403
        return None

    def retains(self, outcome: Outcome) -> bool:
        return self.categorize(outcome) is not None


class AllRecordsPolicy(SelectionPolicy):
    """
    Retains every record.

    Records are split into successful and failed checks by whether the probe
    produced an error, independently of the HTTP status code.
    """

    SUCCESSFUL_CHECKS = "successful_checks"
    FAILED_CHECKS = "failed_checks"

    @property
    def name(self) -> SelectionPolicyName:
        return SelectionPolicyName.ALL

    @property
    def categories(self) -> Tuple[str, ...]:
        return (self.SUCCESSFUL_CHECKS, self.FAILED_CHECKS)

    def categorize(self, outcome: Outcome) -> Optional[str]:
        return self.FAILED_CHECKS if outcome.is_error else self.SUCCESSFUL_CHECKS

    def retains(self, outcome: Outcome) -> bool:
        return True


class InterestingCodesPolicy(SelectionPolicy):
    """
    Retains 2xx responses, 403, 404 and every other 4xx and 5xx response.

    403 and 404 have their own counters and are not counted as client
    errors. Informational and redirect responses, as well as error outcomes,
    are neither retained nor counted.
    """

    SUCCESSFUL_2XX = "successful_2xx"
    FORBIDDEN_403 = "forbidden_403"
    NOT_FOUND_404 = "not_found_404"
    CLIENT_ERROR_4XX = "client_error_4xx"
    SERVER_ERROR_5XX = "server_error_5xx"

    @property
    def name(self) -> SelectionPolicyName:
        return SelectionPolicyName.INTERESTING

    @property
    def categories(self) -> Tuple[str, ...]:
        return (
            self.SUCCESSFUL_2XX,
            self.FORBIDDEN_403,
            self.NOT_FOUND_404,
            self.CLIENT_ERROR_4XX,
            self.SERVER_ERROR_5XX,
        )

    def categorize(self, outcome: Outcome) -> Optional[str]:
        code = _status_code(outcome)
        if code is None:
            return None
        if 200 <= code <= 299:
            return self.SUCCESSFUL_2XX
        if code == 403:
            return self.FORBIDDEN_403
        if code == 404:
            return self.NOT_FOUND_404
        if 400 <= code <= 499:
            return self.CLIENT_ERROR_4XX
        if 500 <= code <= 599:
            return self.SERVER_ERROR_5XX
        return None

    def retains(self, outcome: Outcome) -> bool:
        return self.categorize(outcome) is not None


_POLICIES: Dict[SelectionPolicyName, Type[SelectionPolicy]] = {
    SelectionPolicyName.STATUS_200_403: Status200And403Policy,
    SelectionPolicyName.ALL: AllRecordsPolicy,
    SelectionPolicyName.INTERESTING: InterestingCodesPolicy,
}


def get_policy(name: SelectionPolicyName) -> SelectionPolicy:
    """
    Creates the selection policy registered under the given name.

    Args:
        name: A SelectionPolicyName, or its string value.

    Returns:
        SelectionPolicy: A new instance of the matching policy.

    Raises:
        ValueError: If the name does not identify a known policy.
    """
    return _POLICIES[SelectionPolicyName(name)]()
