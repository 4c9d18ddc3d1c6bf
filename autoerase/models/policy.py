"""Retention policy model."""

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Prefixes commonly used by bots and bridges. Operators can extend this set
# with SUAE_PREFIXES but not replace it.
DEFAULT_EXCLUDED_PREFIXES: frozenset[str] = frozenset(
    {
        "@bluesky_",
        "@blueskybot:",
        "@discord_",
        "@discordbot:",
        "@emailbot:",
        "@gmessages_",
        "@gmessagesbot:",
        "@googlechat_",
        "@googlechatbot:",
        "@heisenbridge:",
        "@hookshot:",
        "@instagram_",
        "@instagrambot:",
        "@linkedin_",
        "@linkedinbot:",
        "@messenger_",
        "@messengerbot:",
        "@reminder:",
        "@signal_",
        "@signalbot:",
        "@slack_",
        "@slackbot:",
        "@steam_",
        "@steambot:",
        "@telegram_",
        "@telegrambot:",
        "@twitter_",
        "@twitterbot:",
        "@wechat_",
        "@wechatbot:",
        "@whatsapp_",
        "@whatsappbot:",
        "@zulip_",
        "@zulipbot:",
    }
)


class Policy(BaseModel):
    """Immutable retention configuration, built once at startup.

    The built-in bot and bridge prefixes are always part of
    ``excluded_prefixes``; extra prefixes only add to them.
    """

    model_config = ConfigDict(frozen=True)

    retention_days: int = Field(gt=0)
    excluded_prefixes: frozenset[str] = DEFAULT_EXCLUDED_PREFIXES
    dry_run: bool = False
    redact: bool = False

    @field_validator("excluded_prefixes")
    @classmethod
    def keep_defaults(cls, value: frozenset[str]) -> frozenset[str]:
        return DEFAULT_EXCLUDED_PREFIXES | {prefix for prefix in value if prefix}

    @classmethod
    def build(
        cls,
        retention_days: int,
        extra_prefixes: Iterable[str] = (),
        dry_run: bool = False,
        redact: bool = False,
    ) -> "Policy":
        """Create a policy whose prefixes are the defaults plus ``extra_prefixes``."""
        return cls(
            retention_days=retention_days,
            excluded_prefixes=frozenset(extra_prefixes),
            dry_run=dry_run,
            redact=redact,
        )

    @classmethod
    def from_settings(cls, settings) -> "Policy":
        return cls.build(
            retention_days=settings.TTL,
            extra_prefixes=settings.PREFIXES,
            dry_run=settings.DRYRUN,
            redact=settings.REDACT,
        )
