#!/usr/bin/python3

import enum


class RewriteStage(enum.StrEnum):
    # steps that can fail; injecting, normalizing and serializing create what they need
    FETCHING = "fetching"
    PARSING = "parsing"
    LOCATING = "locating"


class RewriteError(Exception):
    """
    Base exception for a manifest rewrite that could not be completed.
    No partial manifest is produced when this is raised; the originating exception (if any) is
    available as __cause__.
    """

    stage: RewriteStage

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class NetworkError(RewriteError):
    """
    Exception indicating that the upstream manifest could not be retrieved.
    """

    stage = RewriteStage.FETCHING


class ParseError(RewriteError):
    """
    Exception indicating that the upstream manifest was not well-formed XML.
    """

    stage = RewriteStage.PARSING


class StructureError(RewriteError):
    """
    Exception indicating that the manifest has no Period to attach signaling events to.
    """

    stage = RewriteStage.LOCATING
