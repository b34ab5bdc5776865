#!/usr/bin/python3

import msgspec


class BaseMessage(msgspec.Struct, tag=True):
    pass


class StringMessage(BaseMessage, tag="string-message"):
    # other properly-typed message structs should be used over this
    text: str


class ServerStartedMessage(BaseMessage, tag="server-started"):
    host: str
    port: int
    static_manifest_url: str
    live_manifest_url: str


class RewriteRequestedMessage(BaseMessage, tag="rewrite-requested"):
    source_url: str
    num_descriptors: int

    # true if the request carried no descriptors and the built-in pair was substituted
    default_descriptors: bool


class UnrecognizedModeMessage(BaseMessage, tag="unrecognized-mode"):
    """
    Emitted when a descriptor carries a mode outside of insert / replace / start.
    The mode is still written to the manifest unchanged.
    """

    mode: str
    uri: str


class RewriteFinishedMessage(BaseMessage, tag="rewrite-finished"):
    source_url: str
    events_added: int
    base_location: str


class RewriteFailedMessage(BaseMessage, tag="rewrite-failed"):
    source_url: str
    stage: str
    error_type: str
    reason: str

    cause: str | None = None
    """ String representation of the exception that caused the failure, if any. """
