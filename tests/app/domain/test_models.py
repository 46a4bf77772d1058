"""Testes dos DTOs do Top.gg (User, Voter, Bot, Vote)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.domain.bot import Bot
from app.domain.user import User, Voter, build_avatar_url
from app.domain.vote import Vote


def _user_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "id": "264811613708746752",
        "username": "luca",
        "bio": "",
        "banner": "https://example.com/banner.png",
        "social": {"github": "https://github.com/luca", "twitter": ""},
        "supporter": True,
        "certifiedDev": False,
        "mod": False,
        "webMod": True,
        "admin": False,
        "avatar": "a_abc123",
        "discriminator": "0",
    }
    payload.update(overrides)
    return payload


class TestUser:
    def test_parses_aliases_and_ignores_unknown_fields(self) -> None:
        user = User.model_validate(_user_payload())

        assert user.id == 264811613708746752
        assert user.is_supporter is True
        assert user.is_web_moderator is True
        assert user.socials is not None
        assert user.socials.github == "https://github.com/luca"

    def test_empty_strings_become_none(self) -> None:
        user = User.model_validate(_user_payload())

        assert user.bio is None
        assert user.socials is not None
        assert user.socials.twitter is None

    def test_invalid_id_fails_whole_record(self) -> None:
        with pytest.raises(ValidationError):
            User.model_validate(_user_payload(id="not-a-number"))

    def test_numeric_id_on_wire_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            User.model_validate(_user_payload(id=264811613708746752))

    def test_animated_avatar_url(self) -> None:
        user = User.model_validate(_user_payload())
        assert user.avatar_url == (
            "https://cdn.discordapp.com/avatars/264811613708746752/a_abc123.gif?size=1024"
        )


class TestVoter:
    def test_static_avatar_url(self) -> None:
        voter = Voter.model_validate({"id": "1", "username": "v", "avatar": "abc"})
        assert voter.avatar_url.endswith("/avatars/1/abc.png?size=1024")

    def test_default_avatar_url(self) -> None:
        voter = Voter.model_validate({"id": "264811613708746752", "username": "v"})
        index = (264811613708746752 >> 22) % 6
        assert voter.avatar_url == f"https://cdn.discordapp.com/embed/avatars/{index}.png"

    def test_build_avatar_url_empty_hash_uses_default(self) -> None:
        assert build_avatar_url(None, 0) == "https://cdn.discordapp.com/embed/avatars/0.png"


class TestBot:
    def test_owners_are_parsed_leniently(self) -> None:
        bot = Bot.model_validate(
            {
                "id": "1026525568344264724",
                "username": "bot",
                "shortdesc": "short",
                "owners": ["121919449996460033", "deleted-user", "1"],
                "monthlyPoints": 12,
            }
        )

        assert bot.owners == [121919449996460033, 1]
        assert bot.guilds == []
        assert bot.short_description == "short"
        assert bot.monthly_points == 12


class TestVote:
    def test_bot_vote(self) -> None:
        vote = Vote.model_validate_json(
            '{"bot":"1234567890","user":"9876543210","type":"upvote","isWeekend":true,'
            '"query":"?ref=topgg&x=1"}'
        )

        assert vote.receiver_id == 1234567890
        assert vote.voter_id == 9876543210
        assert vote.is_server is False
        assert vote.is_test is False
        assert vote.is_weekend is True
        assert vote.query_params == {"ref": "topgg", "x": "1"}

    def test_guild_vote(self) -> None:
        vote = Vote.model_validate({"guild": "55", "user": "2", "type": "test"})

        assert vote.receiver_id == 55
        assert vote.is_server is True
        assert vote.is_test is True
        assert vote.is_weekend is False
        assert vote.query_params == {}

    def test_missing_receiver_is_invalid(self) -> None:
        with pytest.raises(ValidationError):
            Vote.model_validate({"user": "2", "type": "upvote"})

    def test_missing_type_is_invalid(self) -> None:
        with pytest.raises(ValidationError):
            Vote.model_validate({"bot": "1", "user": "2"})

    def test_vote_is_immutable(self) -> None:
        vote = Vote.model_validate({"bot": "1", "user": "2", "type": "upvote"})
        with pytest.raises(ValidationError):
            vote.voter_id = 3  # type: ignore[misc]
