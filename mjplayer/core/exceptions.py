# ============================================================================
# FILE: mjplayer/core/exceptions.py
# ============================================================================

class MJPlayerError(Exception):
    """Base class for application errors"""


class PolicyViolation(MJPlayerError):
    """A write was rejected by a row-level policy"""

    def __init__(self, table: str, operation: str):
        self.table = table
        self.operation = operation
        if operation == "insert":
            message = f'new row violates row-level security policy for table "{table}"'
        else:
            message = f'{operation} violates row-level security policy for table "{table}"'
        super().__init__(message)


class InvalidInput(MJPlayerError):
    """Input that passed schema validation but makes no sense for the operation"""


class FeatureUnavailable(MJPlayerError):
    """An external collaborator (payments, referrals) is not wired up"""