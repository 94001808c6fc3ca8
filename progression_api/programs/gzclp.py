"""
GZCLP expressed as a generic program definition.

4-day rotation, 6 exercises across T1/T2/T3 tiers:
- T1: 3 stages (5x3 -> 6x2 -> 10x1), deload 10% on final-stage fail
- T2: 3 stages (3x10 -> 3x8 -> 3x6), add 15 and reset stage on final-stage fail
- T3: 1 stage (3x25 AMRAP), weight grows on an explicit success only

T2 slots start at 65% of the configured T1 weight and progress independently.
"""

NO_CHANGE = {"type": "no_change"}


def _t1(slot_id, exercise_id):
    return {
        "id": slot_id,
        "exerciseId": exercise_id,
        "tier": "t1",
        "stages": [
            {"sets": 5, "reps": 3},
            {"sets": 6, "reps": 2},
            {"sets": 10, "reps": 1},
        ],
        "onSuccess": {"type": "add_weight"},
        "onUndefined": {"type": "add_weight"},
        "onMidStageFail": {"type": "advance_stage"},
        "onFinalStageFail": {"type": "deload_percent", "percent": 10},
        "startWeightKey": exercise_id,
    }


def _t2(slot_id, exercise_id):
    return {
        "id": slot_id,
        "exerciseId": exercise_id,
        "tier": "t2",
        "stages": [
            {"sets": 3, "reps": 10},
            {"sets": 3, "reps": 8},
            {"sets": 3, "reps": 6},
        ],
        "onSuccess": {"type": "add_weight"},
        "onUndefined": {"type": "add_weight"},
        "onMidStageFail": {"type": "advance_stage"},
        "onFinalStageFail": {"type": "add_weight_reset_stage", "amount": 15},
        "startWeightKey": exercise_id,
        "startWeightMultiplier": 0.65,
    }


def _t3(exercise_id):
    return {
        "id": f"{exercise_id}-t3",
        "exerciseId": exercise_id,
        "tier": "t3",
        "stages": [{"sets": 3, "reps": 25, "amrap": True}],
        "onSuccess": {"type": "add_weight"},
        "onUndefined": NO_CHANGE,
        "onMidStageFail": NO_CHANGE,
        "onFinalStageFail": NO_CHANGE,
        "startWeightKey": exercise_id,
    }


GZCLP_DEFINITION = {
    "id": "gzclp",
    "name": "GZCLP",
    "description": (
        "Linear progression based on the GZCL method. A 4-day rotation of "
        "T1, T2 and T3 work built around the main compound lifts."
    ),
    "author": "Cody Lefever",
    "version": 1,
    "category": "strength",
    "source": "preset",
    "cycleLength": 4,
    "totalWorkouts": 90,
    "workoutsPerWeek": 3,
    "exercises": {
        "squat": {"name": "Squat"},
        "bench": {"name": "Bench Press"},
        "deadlift": {"name": "Deadlift"},
        "ohp": {"name": "Overhead Press"},
        "latpulldown": {"name": "Lat Pulldown"},
        "dbrow": {"name": "Dumbbell Row"},
    },
    "weightIncrements": {
        "squat": 5,
        "bench": 2.5,
        "deadlift": 5,
        "ohp": 2.5,
        "latpulldown": 2.5,
        "dbrow": 2.5,
    },
    "days": [
        {
            "name": "Day 1",
            "slots": [_t1("d1-t1", "squat"), _t2("d1-t2", "bench"), _t3("latpulldown")],
        },
        {
            "name": "Day 2",
            "slots": [_t1("d2-t1", "ohp"), _t2("d2-t2", "deadlift"), _t3("dbrow")],
        },
        {
            "name": "Day 3",
            "slots": [_t1("d3-t1", "bench"), _t2("d3-t2", "squat"), _t3("latpulldown")],
        },
        {
            "name": "Day 4",
            "slots": [_t1("d4-t1", "deadlift"), _t2("d4-t2", "ohp"), _t3("dbrow")],
        },
    ],
}

GZCLP_DEFAULT_CONFIG = {
    "squat": 60,
    "bench": 40,
    "deadlift": 80,
    "ohp": 25,
    "latpulldown": 30,
    "dbrow": 15,
}
