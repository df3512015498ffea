"""Exceptions raised by the skill installer.

Every error aborts the whole run; ``skill_installer.cli.main`` is the only
place that turns them into an exit status.
"""


class InstallerError(Exception):
    """Base class for installer failures."""


class ConfigurationError(InstallerError):
    """Illegal skill name or unusable source layout, detected before any write."""


class SafetyError(InstallerError):
    """A path failed the pre-deletion safety gate."""


class SourceError(InstallerError):
    """The skill bundle could not be fetched or staged."""
