"""Triage options supplied through action inputs."""

from pydantic import BaseModel, ConfigDict, Field

from .. import actions
from ..avatar.hasher import DEFAULT_HASH_ALGORITHM, DEFAULT_HASH_SIZE
from ..errors import ConfigurationError

DEFAULT_LABEL = "faceless"
DEFAULT_CLOSE_COMMENT = (
    "This issue has been automatically closed by "
    "[faceless](https://github.com/teamreadme/faceless) due to being created "
    "by a user without an avatar. Please update your github profile picture "
    "and recreate this issue."
)


class TriageConfiguration(BaseModel):
    """What to do with issues opened by accounts using the default avatar."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(DEFAULT_LABEL, description="Label applied to matching issues")
    close_on_match: bool = Field(False, description="Close matching issues")
    close_comment: str = Field(
        DEFAULT_CLOSE_COMMENT, description="Comment posted when closing"
    )
    hash_size: int = Field(DEFAULT_HASH_SIZE, description="Perceptual hash grid size")
    hash_algorithm: str = Field(
        DEFAULT_HASH_ALGORITHM, description="Perceptual hash algorithm"
    )

    @classmethod
    def from_action_inputs(cls) -> "TriageConfiguration":
        """Read the configuration from the action's inputs.

        Empty inputs fall back to defaults. ``close`` is enabled only by the
        exact value ``true``.
        """
        raw_hash_size = actions.get_input("hash-size")
        try:
            hash_size = int(raw_hash_size) if raw_hash_size else DEFAULT_HASH_SIZE
        except ValueError:
            raise ConfigurationError(
                f"Input hash-size must be an integer, got '{raw_hash_size}'"
            )

        return cls(
            label=actions.get_input("label") or DEFAULT_LABEL,
            close_on_match=actions.get_input("close") == "true",
            close_comment=actions.get_input("closeComment") or DEFAULT_CLOSE_COMMENT,
            hash_size=hash_size,
            hash_algorithm=actions.get_input("hash-algorithm")
            or DEFAULT_HASH_ALGORITHM,
        )
