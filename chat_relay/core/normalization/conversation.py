"""
Conversation normalization.

Turns the caller's ordered turn list into the provider's content structure.
The behavior is selected by ``NormalizePolicy``; the normalizer holds no
per-request state, so one instance can serve concurrent requests.
"""

from typing import List, Optional, Sequence

from ...errors import RequestShapeError
from ...models.conversation_types import ContentEntry, ContentRole, NormalizedContent, Turn
from .policies import NormalizePolicy, SystemPreamble

USER_PREFIX = "User: "
BOT_PREFIX = "Bot: "
LEGACY_SKIPPED_TURNS = 2


def role_for(turn: Turn) -> ContentRole:
    """Map a caller speaker to a provider role; anything but ``user`` is ``model``."""
    return ContentRole.USER if turn.is_user else ContentRole.MODEL


def _has_text(turn: Turn) -> bool:
    return bool(turn.text and turn.text.strip())


def flatten_prompt(turns: Sequence[Turn], preamble: Optional[SystemPreamble] = None) -> str:
    """Serialize a history into one ``User:``/``Bot:`` block ending with a ``Bot: `` cue."""
    lines = []
    if preamble is not None:
        lines.append(preamble.instruction)
    for turn in turns:
        prefix = USER_PREFIX if role_for(turn) is ContentRole.USER else BOT_PREFIX
        lines.append(f"{prefix}{turn.text}")
    lines.append(BOT_PREFIX)
    return "\n".join(lines)


class ConversationNormalizer:
    """Normalizes turn lists according to a configured policy."""

    def __init__(
        self,
        policy: NormalizePolicy = NormalizePolicy.PASSTHROUGH,
        preamble: Optional[SystemPreamble] = None,
    ):
        self.policy = NormalizePolicy(policy)
        if preamble is None and self.policy in (NormalizePolicy.PRIMED, NormalizePolicy.LEGACY_SKIP):
            preamble = SystemPreamble()
        self.preamble = preamble

    def map_turns(self, turns: Sequence[Turn]) -> NormalizedContent:
        """Apply the policy without validating the result."""
        turns = list(turns)
        if self.policy is NormalizePolicy.LEGACY_SKIP:
            turns = turns[LEGACY_SKIPPED_TURNS:]

        kept = [turn for turn in turns if _has_text(turn)]

        if self.policy is NormalizePolicy.PROMPT_FLATTEN:
            if not kept:
                return []
            text = flatten_prompt(kept, self.preamble)
            return [ContentEntry(role=ContentRole.USER, parts=[text])]

        contents: List[ContentEntry] = []
        if self.policy in (NormalizePolicy.PRIMED, NormalizePolicy.LEGACY_SKIP):
            contents.append(ContentEntry(role=ContentRole.USER, parts=[self.preamble.instruction]))
            contents.append(ContentEntry(role=ContentRole.MODEL, parts=[self.preamble.opening_line]))

        contents.extend(ContentEntry(role=role_for(turn), parts=[turn.text]) for turn in kept)
        return contents

    def normalize(self, turns: Sequence[Turn]) -> NormalizedContent:
        """
        Normalize ``turns`` for the provider.

        Raises:
            RequestShapeError: the result is empty or does not end with a user turn
        """
        contents = self.map_turns(turns)
        if not contents:
            raise RequestShapeError("conversation has no non-empty turns")
        if contents[-1].role is not ContentRole.USER:
            raise RequestShapeError("conversation must end with a user turn")
        return contents


def normalize(
    turns: Sequence[Turn],
    policy: NormalizePolicy = NormalizePolicy.PASSTHROUGH,
    preamble: Optional[SystemPreamble] = None,
) -> NormalizedContent:
    """Convenience wrapper around ``ConversationNormalizer.normalize``."""
    return ConversationNormalizer(policy, preamble).normalize(turns)
