class TzInstantError(Exception):
    """Base error."""

class InvalidEpoch(TzInstantError):
    """Raised when construction input is not a usable epoch and silent=False."""

class UnknownZone(TzInstantError, ValueError):
    """Raised when a zone token matches no resolution rule. Never silenced."""

    def __init__(self, token: object):
        self.token = token
        super().__init__(f"Cannot find timezone named: '{token}'. Please enter an IANA timezone id.")

class UnparseableTime(TzInstantError, ValueError):
    """Raised when a time literal cannot be parsed. Never silenced."""

    def __init__(self, text: object):
        self.text = text
        super().__init__(f"Cannot parse time '{text}'. Expected e.g. '4pm', '4:30pm' or '16:30'.")

class InvalidField(TzInstantError, ValueError):
    """Unknown unit/month/season name, format variant, or out-of-range value."""
