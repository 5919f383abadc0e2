"""Career Engine: weighted scoring and matching for career guidance."""

__version__ = "0.1.0"
