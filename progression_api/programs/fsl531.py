"""
5/3/1 "First Set Last" expressed as a generic program definition.

A 9-workout cycle (three weeks of three days). Every load is a percentage of
a per-lift training max. The AMRAP top set in the 5/3/1 week raises the
training max when at least one rep was completed, and every slot reading that
training max follows from then on.
"""

NO_CHANGE = {"type": "no_change"}

LIFTS = {
    "squat": {"tm": "squat_tm", "increment": 5},
    "bench": {"tm": "bench_tm", "increment": 2.5},
    "deadlift": {"tm": "deadlift_tm", "increment": 5},
    "ohp": {"tm": "ohp_tm", "increment": 2.5},
}

DAY_LIFTS = [
    ("Squat + Bench", ["squat", "bench"], True),
    ("Deadlift + Press", ["deadlift", "ohp"], True),
    ("Bench + Squat", ["bench", "squat"], False),
]

WEEKS = [
    {"label": "Week 1 (5s)", "pcts": (0.65, 0.75, 0.85), "reps": (5, 5, 5), "tm_update": False},
    {"label": "Week 2 (3s)", "pcts": (0.70, 0.80, 0.90), "reps": (3, 3, 3), "tm_update": False},
    {"label": "Week 3 (5/3/1)", "pcts": (0.75, 0.85, 0.95), "reps": (5, 3, 1), "tm_update": True},
]


def _tm_slot(slot_id, exercise_id, pct, reps, sets=1, tier="main"):
    return {
        "id": slot_id,
        "exerciseId": exercise_id,
        "tier": tier,
        "role": "secondary",
        "trainingMaxKey": LIFTS[exercise_id]["tm"],
        "tmPercent": pct,
        "stages": [{"sets": sets, "reps": reps}],
        "onSuccess": NO_CHANGE,
        "onUndefined": NO_CHANGE,
        "onMidStageFail": NO_CHANGE,
        "onFinalStageFail": NO_CHANGE,
        "startWeightKey": LIFTS[exercise_id]["tm"],
    }


def _top_slot(exercise_id, pct, reps, tm_increment=None):
    slot = _tm_slot(f"{exercise_id}_top", exercise_id, pct, reps)
    slot["role"] = "primary"
    slot["stages"] = [{"sets": 1, "reps": reps, "amrap": True}]
    if tm_increment is not None:
        slot["onSuccess"] = {"type": "update_tm", "amount": tm_increment, "minAmrapReps": 1}
    return slot


def _week_days(week):
    pcts, reps = week["pcts"], week["reps"]
    days = []
    for name, lifts, updates_tm in DAY_LIFTS:
        slots = []
        for lift in lifts:
            tm_increment = LIFTS[lift]["increment"] if week["tm_update"] and updates_tm else None
            slots.extend(
                [
                    _tm_slot(f"{lift}_s1", lift, pcts[0], reps[0]),
                    _tm_slot(f"{lift}_s2", lift, pcts[1], reps[1]),
                    _top_slot(lift, pcts[2], reps[2], tm_increment),
                    _tm_slot(f"{lift}_fsl", lift, pcts[0], 5, sets=5, tier="supplemental"),
                ]
            )
        days.append({"name": f"{week['label']} - {name}", "slots": slots})
    return days


FSL531_DEFINITION = {
    "id": "fsl531",
    "name": "5/3/1 First Set Last",
    "description": "Training-max percentage waves with 5x5 supplemental work at the first-set load.",
    "author": "Jim Wendler",
    "version": 1,
    "category": "strength",
    "source": "preset",
    "cycleLength": 9,
    "totalWorkouts": 72,
    "workoutsPerWeek": 3,
    "exercises": {
        "squat": {"name": "Squat"},
        "bench": {"name": "Bench Press"},
        "deadlift": {"name": "Deadlift"},
        "ohp": {"name": "Overhead Press"},
    },
    "weightIncrements": {},
    "days": [day for week in WEEKS for day in _week_days(week)],
}

FSL531_DEFAULT_CONFIG = {
    "squat_tm": 100,
    "bench_tm": 70,
    "deadlift_tm": 120,
    "ohp_tm": 45,
}
