"""
StrongLifts 5x5 expressed as a generic program definition.

Two alternating workouts. Every success adds weight; a failure repeats the
weight (up to three attempts) and a third consecutive failure deloads 10%.
"""


def _five_by_five(exercise_id, sets, reps, amount):
    return {
        "id": exercise_id,
        "exerciseId": exercise_id,
        "tier": "main",
        "role": "primary",
        # Identical stages: the stage index counts failed attempts at a weight
        "stages": [{"sets": sets, "reps": reps}] * 3,
        "onSuccess": {"type": "add_weight_reset_stage", "amount": amount},
        "onUndefined": {"type": "add_weight_reset_stage", "amount": amount},
        "onMidStageFail": {"type": "advance_stage"},
        "onFinalStageFail": {"type": "deload_percent", "percent": 10},
        "startWeightKey": exercise_id,
    }


STRONGLIFTS_DEFINITION = {
    "id": "stronglifts-5x5",
    "name": "StrongLifts 5x5",
    "description": "Alternating A/B full-body workouts on the five main barbell lifts.",
    "author": "Mehdi Hadim",
    "version": 1,
    "category": "strength",
    "source": "preset",
    "cycleLength": 2,
    "totalWorkouts": 90,
    "workoutsPerWeek": 3,
    "exercises": {
        "squat": {"name": "Squat"},
        "bench": {"name": "Bench Press"},
        "ohp": {"name": "Overhead Press"},
        "deadlift": {"name": "Deadlift"},
        "bent_over_row": {"name": "Barbell Row"},
    },
    "weightIncrements": {
        "squat": 2.5,
        "bench": 2.5,
        "ohp": 2.5,
        "deadlift": 5,
        "bent_over_row": 2.5,
    },
    "days": [
        {
            "name": "Workout A",
            "slots": [
                _five_by_five("squat", 5, 5, 2.5),
                _five_by_five("bench", 5, 5, 2.5),
                _five_by_five("bent_over_row", 5, 5, 2.5),
            ],
        },
        {
            "name": "Workout B",
            "slots": [
                _five_by_five("squat", 5, 5, 2.5),
                _five_by_five("ohp", 5, 5, 2.5),
                _five_by_five("deadlift", 1, 5, 5),
            ],
        },
    ],
}

STRONGLIFTS_DEFAULT_CONFIG = {
    "squat": 20,
    "bench": 20,
    "ohp": 20,
    "deadlift": 40,
    "bent_over_row": 30,
}
