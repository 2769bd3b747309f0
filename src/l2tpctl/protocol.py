"""
Control request encoding.

Wire format (text, one request per connection):

    <kind> <tunnel>                      fixed requests
    <kind> <tunnel> <opt1>;<opt2>;...;   add/modify requests

Each option is ``key=value``. Two-word keys keep their inner space
(``ppp debug=1``). The daemon closes the connection after writing its
response; there is no response framing.

Option tokens come straight from the command line and take one of three
shapes:

    key=value    complete pair
    key=         key only, the next token is the value
    word         first half of a two-word key
"""

from enum import Enum

from l2tpctl.exceptions import EncodingError
from l2tpctl.models.enums import RequestKind
from l2tpctl.utils.logger import get_logger

logger = get_logger(__name__)

# =============================================================================
# Delimiters
# =============================================================================

FIELD_SEPARATOR = " "
OPTION_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = "="


class EncoderState(Enum):
    """States of the option-token encoder."""

    EXPECTING_KEY = "expecting_key"
    EXPECTING_VALUE = "expecting_value"


# =============================================================================
# Option Encoding
# =============================================================================


def _step(state: EncoderState, token: str) -> tuple[str, EncoderState]:
    """
    Advance the encoder by one token.

    Returns:
        Text to emit for the token and the next state.
    """
    if state is EncoderState.EXPECTING_VALUE:
        # Taken verbatim, even if it contains '='
        return token + OPTION_SEPARATOR, EncoderState.EXPECTING_KEY

    # Only the first '=' decides whether the token carries its value
    eq_pos = token.find(KEY_VALUE_SEPARATOR)
    if eq_pos == -1:
        return token + FIELD_SEPARATOR, EncoderState.EXPECTING_KEY
    if eq_pos == len(token) - 1:
        return token, EncoderState.EXPECTING_VALUE
    return token + OPTION_SEPARATOR, EncoderState.EXPECTING_KEY


def encode_options(tokens: list[str]) -> str:
    """
    Encode command-line option tokens into the daemon's option list.

    Args:
        tokens: Option tokens in command-line order.

    Returns:
        ``;``-terminated option string, e.g. ``"lns=192.0.2.1;ppp debug=1;"``.

    Raises:
        EncodingError: No tokens, or the input ends in the middle of a pair.
    """
    if not tokens:
        raise EncodingError("tunnel configuration expected")

    parts: list[str] = []
    state = EncoderState.EXPECTING_KEY
    for token in tokens:
        text, state = _step(state, token)
        parts.append(text)

    if state is EncoderState.EXPECTING_VALUE:
        raise EncodingError(f"missing value for option '{tokens[-1]}'")
    if parts[-1].endswith(FIELD_SEPARATOR):
        raise EncodingError(f"missing value for option '{parts[-1].strip()}'")

    encoded = "".join(parts)
    logger.debug(f"Encoded {len(tokens)} option tokens: {encoded}")
    return encoded


def decode_options(payload: str) -> list[tuple[str, str]]:
    """
    Split an encoded option list back into ``(key, value)`` pairs.

    Mirrors how the daemon reads the list: pairs are separated by ``;``
    and split on their first ``=``. A trailing separator is tolerated.
    """
    pairs = []
    for option in payload.split(OPTION_SEPARATOR):
        if not option:
            continue
        key, _, value = option.partition(KEY_VALUE_SEPARATOR)
        pairs.append((key, value))
    return pairs


# =============================================================================
# Request Lines
# =============================================================================


def validate_tunnel_name(tunnel: str) -> str:
    """
    Check that a tunnel name can be placed on the request line.

    Raises:
        EncodingError: Name is empty or contains whitespace.
    """
    if not tunnel:
        raise EncodingError("tunnel name not specified")
    if any(ch.isspace() for ch in tunnel):
        raise EncodingError("tunnel name shouldn't include spaces")
    return tunnel


def build_request(kind: RequestKind, tunnel: str | None = None) -> str:
    """
    Build a fixed one-line request.

    Args:
        kind: Request tag.
        tunnel: Tunnel name, omitted only for requests that do not need one.

    Returns:
        ``"<kind> <tunnel>"``, or ``"<kind>"`` without a tunnel.
    """
    kind = RequestKind(kind)
    if tunnel is None:
        return kind.value
    validate_tunnel_name(tunnel)
    return f"{kind.value}{FIELD_SEPARATOR}{tunnel}"


def build_add_request(kind: RequestKind, tunnel: str, tokens: list[str]) -> str:
    """
    Build an add/modify request carrying an encoded option list.

    Raises:
        EncodingError: Kind takes no options, bad tunnel name, or bad options.
    """
    kind = RequestKind(kind)
    if not kind.carries_options:
        raise EncodingError(f"request '{kind.name}' does not take options")
    head = build_request(kind, tunnel)
    return f"{head}{FIELD_SEPARATOR}{encode_options(tokens)}"
