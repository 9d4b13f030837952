"""
Shared state handed to every builder of one documentation run.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config.schemas import BuildOptions
from ..log import LogConfig, Logger, LoggerFactory
from ..members import VisibleMemberCache


@dataclass
class BuildContext:
    """
    Build context.

    Attributes:
        options: Build options, passed explicitly to builders and writers
        lg: Logger builders derive their own loggers from
        member_cache: Visible member tables shared across builders
    """

    options: BuildOptions = field(default_factory=BuildOptions)
    lg: Logger | None = None
    member_cache: VisibleMemberCache | None = None

    def __post_init__(self) -> None:
        if self.lg is None:
            self.lg = LoggerFactory.create("/memberdoc", LogConfig.from_params("false"))
        if self.member_cache is None:
            self.member_cache = VisibleMemberCache(self.options)
