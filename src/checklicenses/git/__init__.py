"""Git collaborators for checklicenses."""

from checklicenses.git.lister import GitTrackedFileLister, StaticFileLister, TrackedFileLister

__all__ = ["GitTrackedFileLister", "StaticFileLister", "TrackedFileLister"]
