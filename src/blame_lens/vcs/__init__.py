from .base import VCSProvider
from .detector import VCS_PROVIDERS, detect_vcs
from .git import Git
