"""METAR report decoder."""

import logging
from typing import Optional, Sequence, Tuple

from metar_wx.decoder.groups import DEFAULT_GROUP_ORDER, SKIP, GroupDecoder
from metar_wx.decoder.models import DecodeError, DecodeResult
from metar_wx.decoder.session import ParseSession
from metar_wx.decoder.tokenizer import tokenize

logger = logging.getLogger(__name__)


class MetarDecoder:
    """
    Decode raw METAR text into a WeatherObservation.

    A METAR is a sequence of optional groups that must appear in a fixed
    order. The decoder walks that order with two cursors: one over the
    report's groups and one over the group kinds. Each kind's decoder either
    consumes the current group or declines, in which case the kind is
    treated as absent and the next kind is tried on the same group.
    Repeatable kinds (runway, present weather, clouds) stay in place after a
    match so several consecutive groups of the same kind are consumed.

    Decoding stops when the group kinds or the report run out, so remarks
    and anything else after the altimeter are ignored. The decoder never
    raises on odd input: unknown groups are skipped.

    Example:
        result = MetarDecoder().decode("KTIK 251753Z 04009KT 10SM OVC037 01/M04 A3010")
        result.observation.wind.direction  # 'NE'
    """

    def __init__(self, groups: Optional[Sequence[GroupDecoder]] = None):
        """
        Args:
            groups: Ordered group decoders. Defaults to the standard METAR order.
        """
        self._groups: Tuple[GroupDecoder, ...] = tuple(groups) if groups is not None else DEFAULT_GROUP_ORDER

    @property
    def groups(self) -> Tuple[GroupDecoder, ...]:
        return self._groups

    def decode(self, raw_text: str) -> DecodeResult:
        """
        Decode one report.

        Args:
            raw_text: Raw METAR, station identifier first

        Returns:
            DecodeResult with the observation, or with DecodeError.NO_DATA
            when the report is empty
        """
        if not isinstance(raw_text, str):
            raise ValueError(f"METAR must be a string, got {type(raw_text).__name__}")

        tokens = tokenize(raw_text)
        if not tokens:
            logger.debug("Empty METAR, nothing to decode")
            return DecodeResult(error=DecodeError.NO_DATA)

        session = ParseSession(tokens=tokens)
        self._run(session)
        return DecodeResult(observation=session.to_observation())

    def _run(self, session: ParseSession) -> None:
        """Advance both cursors until the group kinds or the tokens run out."""
        while session.group_cursor < len(self._groups):
            token = session.current_token
            if token is None:
                break

            decoder = self._groups[session.group_cursor]
            step = decoder.attempt(token, session)
            if not step.consumed and not step.advance:
                # neither cursor would move
                step = SKIP
            if step.consumed:
                session.token_cursor += 1
            elif step.advance:
                logger.debug("No %s group at '%s'", decoder.kind.value, token)
            session.group_cursor += step.advance

        if session.current_token is not None:
            logger.debug(
                "Stopped decoding with %d group(s) left: %s",
                len(session.tokens) - session.token_cursor,
                " ".join(session.tokens[session.token_cursor:]),
            )


_default_decoder = MetarDecoder()


def decode_metar(raw_text: str) -> DecodeResult:
    """Decode a METAR with the standard group order."""
    return _default_decoder.decode(raw_text)
