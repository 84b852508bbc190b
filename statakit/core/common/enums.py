# File: statakit/core/common/enums.py

from enum import Enum, unique

@unique
class SessionState(str, Enum):
    RUNNING = "running"
    NOT_RUNNING = "not_running"
    LAUNCHING = "launching"

@unique
class ActionOutcome(str, Enum):
    ACTIVATED_AND_ACTED = "activated_and_acted"
    LAUNCHED_AND_ACTED = "launched_and_acted"
    FAILED = "failed"
