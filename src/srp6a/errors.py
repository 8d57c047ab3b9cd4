
class SRPError(Exception):
    pass
class InvalidGroup(SRPError):
    """The requested bit size is not one of the RFC 5054 groups we carry."""
class InvalidEphemeral(SRPError):
    """The peer's public ephemeral value is 0 mod N, or the scrambling
    parameter u came out as zero. The attempt must be abandoned: continuing
    would let the peer force the shared secret to a known value."""
class InvalidClientProof(SRPError):
    """The client's M1 does not match ours. The client does not know the
    password (or is using a different group). M2 and K are withheld."""
class InvalidServerProof(SRPError):
    """The server's M2 does not match ours. The server does not know our
    verifier, so the session key must not be used."""
class MalformedValue(SRPError, ValueError):
    """A wire value could not be parsed as a hex integer of the right size."""
