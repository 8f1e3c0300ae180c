"""Option descriptors for the waitlist form.

Every choice field is driven by an ordered tuple of ``Option(tag, label)``.
Tags are what gets validated and stored; labels are what the UI shows.
Set-valued fields are edited through the pure :func:`toggle` helper.
"""
from __future__ import annotations

from typing import Iterable, NamedTuple, Tuple, FrozenSet, List


class Option(NamedTuple):
    tag: str
    label: str


Options = Tuple[Option, ...]

# ---------------------------------------------------------------------------
# Section 1: Basic Info
# ---------------------------------------------------------------------------

AGE_GROUPS: Options = (
    Option("under18", "Under 18"),
    Option("18-24", "18-24"),
    Option("25-34", "25-34"),
    Option("35-44", "35-44"),
    Option("45plus", "45+"),
)

# ---------------------------------------------------------------------------
# Section 2: Gaming Behavior
# ---------------------------------------------------------------------------

GAMING_PLATFORMS: Options = (
    Option("android", "Android"),
    Option("ios", "iOS"),
    Option("web", "Web Browser"),
    Option("new", "Not a gamer yet, curious to try"),
)

GAMING_FREQUENCIES: Options = (
    Option("daily", "Daily"),
    Option("weekly", "Weekly"),
    Option("occasionally", "Occasionally"),
    Option("rarely", "Rarely"),
)

RECENT_GAMES: Options = (
    Option("uno", "UNO"),
    Option("ludo", "Ludo King"),
    Option("pool", "8 Ball Pool"),
    Option("teenpatti", "Call Break / Teen Patti"),
    Option("monopoly", "Monopoly"),
)

KEEP_PLAYING_FACTORS: Options = (
    Option("friends", "Fun with friends"),
    Option("rules", "Easy rules"),
    Option("fast", "Fast matches"),
    Option("customization", "Customization"),
    Option("leaderboards", "Leaderboards"),
    Option("rewards", "Rewards or Coins"),
)

# ---------------------------------------------------------------------------
# Section 3: Feature Wishlist
# ---------------------------------------------------------------------------

DESIRED_FEATURES: Options = (
    Option("private-rooms", "Private Rooms with Friends"),
    Option("quick-match", "Quick Match with Random Players"),
    Option("tournaments", "Tournaments & Leaderboards"),
    Option("avatar", "Avatar Customization"),
    Option("chat", "In-Game Chat"),
    Option("skins", "Card Skins / Themes"),
    Option("xp", "XP & Badge System"),
    Option("history", "Match History / Stats"),
    Option("challenge", "Challenge Friends"),
    Option("spectator", "Spectator Mode"),
)

YES_NO: Options = (
    Option("yes", "Yes"),
    Option("no", "No"),
)

CONTACT_PREFERENCES: Options = (
    Option("email", "Email"),
    Option("sms", "SMS"),
    Option("whatsapp", "WhatsApp"),
    Option("discord", "Discord"),
    Option("social", "I'll follow on social media"),
)

# ---------------------------------------------------------------------------
# Section 4: Viral Boost
# ---------------------------------------------------------------------------

YES_NO_MAYBE: Options = (
    Option("yes", "Yes"),
    Option("no", "No"),
    Option("maybe", "Maybe"),
)

# Form key -> option list for every set-valued field.
MULTI_SELECT_OPTIONS = {
    "gamingPlatforms": GAMING_PLATFORMS,
    "recentGames": RECENT_GAMES,
    "keepPlaying": KEEP_PLAYING_FACTORS,
    "desiredFeatures": DESIRED_FEATURES,
    "contactPreference": CONTACT_PREFERENCES,
}


def tags(options: Options) -> Tuple[str, ...]:
    """Return the tags of *options* in display order."""
    return tuple(opt.tag for opt in options)


def label_for(options: Options, tag: str) -> str:
    """Return the display label for *tag*, or the tag itself if unknown."""
    for opt in options:
        if opt.tag == tag:
            return opt.label
    return tag


def toggle(selected: Iterable[str], tag: str) -> FrozenSet[str]:
    """Return *selected* with *tag* added if absent, removed if present."""
    current = frozenset(selected)
    if tag in current:
        return current - {tag}
    return current | {tag}


def ordered(selected: Iterable[str], options: Options) -> List[str]:
    """Return the tags in *selected* sorted by their position in *options*.

    Tags missing from *options* keep their relative order and go last.
    """
    chosen = list(dict.fromkeys(selected))
    position = {opt.tag: i for i, opt in enumerate(options)}
    return sorted(chosen, key=lambda t: position.get(t, len(position)))
