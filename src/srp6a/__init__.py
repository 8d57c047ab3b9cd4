from .srp import (SRPClient, SRPServer, Ephemeral, Session,
                  generate_salt, derive_private_key, derive_verifier,
                  generate_client_ephemeral, derive_client_session,
                  verify_session, generate_server_ephemeral,
                  derive_server_session)
from .params import (GroupParameters, for_bit_size, DefaultParams,
                     Params1024, Params1536, Params2048, Params3072,
                     Params4096)
from .errors import (SRPError, InvalidGroup, InvalidEphemeral,
                     InvalidClientProof, InvalidServerProof, MalformedValue)
from .keys import expand_session_key
_hush_pyflakes = [SRPClient, SRPServer, Ephemeral, Session,
                  generate_salt, derive_private_key, derive_verifier,
                  generate_client_ephemeral, derive_client_session,
                  verify_session, generate_server_ephemeral,
                  derive_server_session,
                  GroupParameters, for_bit_size, DefaultParams,
                  Params1024, Params1536, Params2048, Params3072, Params4096,
                  SRPError, InvalidGroup, InvalidEphemeral,
                  InvalidClientProof, InvalidServerProof, MalformedValue,
                  expand_session_key]
del _hush_pyflakes

__version__ = "0.1.0"
