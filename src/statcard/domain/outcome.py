from enum import IntEnum


class OutcomeCategory(IntEnum):
    """Plate-appearance outcomes, numbered by their outcome-table index."""

    # Hits
    SINGLE_CLEAN = 15
    SINGLE_ADVANCE = 16
    DOUBLE = 17
    TRIPLE = 18
    HOME_RUN = 19
    HOME_RUN_VARIANT = 20

    # Outs
    GROUND_OUT = 21
    FLY_OUT = 22
    POP_OUT = 23
    LINE_OUT = 24
    STRIKEOUT_LOOKING = 25
    STRIKEOUT_SWINGING = 26

    # Walks / HBP
    WALK = 27
    WALK_INTENTIONAL = 28
    HIT_BY_PITCH = 29

    # Special plays
    GROUND_OUT_ADVANCE = 30
    SACRIFICE = 31
    DOUBLE_PLAY = 32
    DOUBLE_PLAY_LINE = 33
    REACHED_ON_ERROR = 34
    FIELDERS_CHOICE = 35

    # Rare events
    STOLEN_BASE_OPP = 36
    WILD_PITCH = 37
    BALK = 38
    PASSED_BALL = 39
    SPECIAL_EVENT = 40

    @property
    def is_hit(self) -> bool:
        return OutcomeCategory.SINGLE_CLEAN <= self <= OutcomeCategory.HOME_RUN_VARIANT

    @property
    def is_strikeout(self) -> bool:
        return self in (OutcomeCategory.STRIKEOUT_LOOKING, OutcomeCategory.STRIKEOUT_SWINGING)
