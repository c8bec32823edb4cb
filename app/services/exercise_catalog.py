"""
Exercise Catalog

Static library of exercises with the prerequisites the planner filters on.
Entries are frozen and the catalog order is significant: every selection
keeps catalog order when ranking ties.
"""

from typing import List, Optional

from app.enums import CardioType, ExerciseCategory, TargetArea
from app.schemas.planner_schemas import Exercise

REHAB = ExerciseCategory.REHAB
MOBILITY = ExerciseCategory.MOBILITY
CARDIO = ExerciseCategory.CARDIO
STRENGTH = ExerciseCategory.STRENGTH


EXERCISES = (
    # Shoulder rehab and mobility, roughly easiest first
    Exercise(
        id="pendulum-circles", name="Pendulum Circles",
        category=MOBILITY, target_area=TargetArea.SHOULDER, difficulty=1,
        instructions="Lean on a table with the good arm, let the injured arm hang and draw small circles by shifting your body.",
        sets="2-3", duration="30 sec",
    ),
    Exercise(
        id="elbow-wrist-hand-rom", name="Elbow, Wrist & Hand Range of Motion",
        category=REHAB, target_area=TargetArea.SHOULDER, difficulty=1,
        instructions="Keep the upper arm at your side. Bend and straighten the elbow, circle the wrist, squeeze a soft ball.",
        sets="2", reps="10-15",
    ),
    Exercise(
        id="scapular-squeezes", name="Scapular Squeezes",
        category=REHAB, target_area=TargetArea.SHOULDER, difficulty=1,
        instructions="Sit tall and draw the shoulder blades back and down. Hold 3 seconds, relax.",
        sets="3", reps="10",
    ),
    Exercise(
        id="table-slides", name="Table Slides (Flexion)",
        category=MOBILITY, target_area=TargetArea.SHOULDER, difficulty=1,
        instructions="Seated at a table, slide a towel forward with the injured hand as far as comfortable, then return.",
        sets="2", reps="10",
    ),
    Exercise(
        id="isometric-external-rotation", name="Isometric External Rotation",
        category=REHAB, target_area=TargetArea.SHOULDER, difficulty=2,
        requires_external_rotation=True,
        instructions="Elbow bent 90 degrees against a door frame, press the back of the hand outward without moving.",
        sets="3", reps="5", duration="10 sec",
    ),
    Exercise(
        id="isometric-internal-rotation", name="Isometric Internal Rotation",
        category=REHAB, target_area=TargetArea.SHOULDER, difficulty=2,
        instructions="Elbow bent 90 degrees against a door frame, press the palm inward without moving.",
        sets="3", reps="5", duration="10 sec",
    ),
    Exercise(
        id="supine-cane-flexion", name="Supine Cane Flexion",
        category=MOBILITY, target_area=TargetArea.SHOULDER, difficulty=2,
        min_flexion_angle=30,
        instructions="Lying on your back, hold a cane with both hands and use the good arm to lift the injured arm overhead.",
        sets="2", reps="10",
    ),
    Exercise(
        id="cane-external-rotation", name="Cane External Rotation",
        category=MOBILITY, target_area=TargetArea.SHOULDER, difficulty=2,
        requires_external_rotation=True,
        instructions="Elbow tucked at your side, push the injured hand outward with a cane held by the good hand.",
        sets="2", reps="10",
    ),
    Exercise(
        id="wall-walks", name="Wall Finger Walks",
        category=MOBILITY, target_area=TargetArea.SHOULDER, difficulty=2,
        min_flexion_angle=60,
        instructions="Facing a wall, walk the fingers up as high as comfortable, hold, and walk back down.",
        sets="2", reps="8",
    ),
    Exercise(
        id="sleeper-stretch", name="Sleeper Stretch",
        category=MOBILITY, target_area=TargetArea.SHOULDER, difficulty=2,
        min_flexion_angle=60, min_abduction_angle=60,
        instructions="Lie on the injured side, elbow at shoulder height, gently press the forearm toward the floor.",
        sets="3", duration="30 sec",
    ),
    Exercise(
        id="band-rows", name="Resistance Band Rows",
        category=REHAB, target_area=TargetArea.SHOULDER, difficulty=3,
        requires_shoulder_loading=True,
        min_flexion_angle=60, min_abduction_angle=30,
        instructions="Band anchored at chest height, pull elbows back while squeezing the shoulder blades.",
        sets="3", reps="12-15",
    ),
    Exercise(
        id="band-external-rotation", name="Band External Rotation",
        category=REHAB, target_area=TargetArea.SHOULDER, difficulty=3,
        requires_shoulder_loading=True, requires_external_rotation=True,
        instructions="Towel roll under the elbow, rotate the forearm outward against a light band.",
        sets="3", reps="12",
    ),
    Exercise(
        id="band-internal-rotation", name="Band Internal Rotation",
        category=REHAB, target_area=TargetArea.SHOULDER, difficulty=3,
        requires_shoulder_loading=True,
        instructions="Towel roll under the elbow, rotate the forearm across the belly against a light band.",
        sets="3", reps="12",
    ),
    Exercise(
        id="sidelying-external-rotation", name="Side-Lying External Rotation",
        category=REHAB, target_area=TargetArea.SHOULDER, difficulty=3,
        requires_shoulder_loading=True, requires_external_rotation=True,
        instructions="Lying on the good side with a light dumbbell, rotate the forearm up keeping the elbow on your ribs.",
        sets="3", reps="10-12",
    ),
    Exercise(
        id="serratus-punch", name="Supine Serratus Punch",
        category=REHAB, target_area=TargetArea.SHOULDER, difficulty=3,
        requires_shoulder_loading=True,
        min_flexion_angle=90,
        instructions="Lying down with a light weight, reach toward the ceiling by protracting the shoulder blade.",
        sets="3", reps="12",
    ),
    Exercise(
        id="wall-slides", name="Wall Slides",
        category=MOBILITY, target_area=TargetArea.SHOULDER, difficulty=3,
        requires_overhead=True,
        min_flexion_angle=90, min_abduction_angle=60,
        instructions="Forearms on the wall, slide up into a Y while keeping the ribs down.",
        sets="2", reps="10",
    ),
    Exercise(
        id="prone-ytw", name="Prone Y-T-W Raises",
        category=REHAB, target_area=TargetArea.SHOULDER, difficulty=4,
        requires_shoulder_loading=True,
        min_flexion_angle=90, min_abduction_angle=90,
        instructions="Face down on a bench, raise the arms into Y, T and W shapes with thumbs up.",
        sets="2", reps="8-10",
    ),
    Exercise(
        id="push-up-plus", name="Incline Push-Up Plus",
        category=REHAB, target_area=TargetArea.SHOULDER, difficulty=4,
        requires_shoulder_loading=True,
        min_flexion_angle=90, min_abduction_angle=60,
        instructions="Push-up against a counter, finish each rep by pushing the shoulder blades apart.",
        sets="3", reps="8-12",
    ),
    Exercise(
        id="light-overhead-press", name="Light Dumbbell Overhead Press",
        category=REHAB, target_area=TargetArea.SHOULDER, difficulty=4,
        requires_overhead=True, requires_shoulder_loading=True,
        min_flexion_angle=120, min_abduction_angle=120,
        instructions="Seated, press light dumbbells overhead in the scapular plane. Stop short of pain.",
        sets="3", reps="10",
    ),
    Exercise(
        id="overhead-ball-dribbles", name="Overhead Wall Ball Dribbles",
        category=REHAB, target_area=TargetArea.SHOULDER, difficulty=5,
        requires_overhead=True, requires_shoulder_loading=True, requires_external_rotation=True,
        min_flexion_angle=150, min_abduction_angle=150,
        instructions="Arm overhead, dribble a small ball against the wall quickly and under control.",
        sets="3", duration="30 sec",
    ),

    # Cardio
    Exercise(
        id="walk", name="Brisk Walk",
        category=CARDIO, target_area=TargetArea.LEGS, difficulty=1,
        instructions="Walk at a pace where you can talk in full sentences. Arm can stay relaxed or in the sling.",
        duration="30 min", cardio_type=CardioType.WALK,
    ),
    Exercise(
        id="bike-no-arms", name="Stationary Bike (Hands Free)",
        category=CARDIO, target_area=TargetArea.LEGS, difficulty=1,
        instructions="Upright or recumbent bike without leaning on the handlebars with the injured arm.",
        duration="30 min", cardio_type=CardioType.BIKE,
    ),
    Exercise(
        id="elliptical-no-arms", name="Elliptical (Legs Only)",
        category=CARDIO, target_area=TargetArea.LEGS, difficulty=2,
        instructions="Hold the fixed center rails lightly, do not use the moving arm handles.",
        duration="30 min", cardio_type=CardioType.ELLIPTICAL,
    ),
    Exercise(
        id="run-easy", name="Easy Run",
        category=CARDIO, target_area=TargetArea.LEGS, difficulty=2,
        instructions="Conversational pace on flat ground. Keep the arm swing small and relaxed.",
        duration="30 min", cardio_type=CardioType.RUN,
    ),
    Exercise(
        id="swim-kick", name="Kickboard Swim",
        category=CARDIO, target_area=TargetArea.FULL_BODY, difficulty=2,
        min_flexion_angle=60,
        instructions="Kick laps holding a kickboard at arm's length. No strokes with the injured arm.",
        duration="20 min", cardio_type=CardioType.SWIM,
    ),
    Exercise(
        id="row-light", name="Light Rowing",
        category=CARDIO, target_area=TargetArea.FULL_BODY, difficulty=3,
        requires_shoulder_loading=True,
        min_flexion_angle=90, min_abduction_angle=60,
        instructions="Low damper setting, short strokes, stop at any shoulder discomfort.",
        duration="15 min", cardio_type=CardioType.ROW,
    ),

    # Strength
    Exercise(
        id="bodyweight-squat", name="Bodyweight Squat",
        category=STRENGTH, target_area=TargetArea.LEGS, difficulty=1,
        instructions="Feet shoulder width, sit back and down, stand tall. Arms can stay at your sides.",
        sets="3", reps="12-15",
    ),
    Exercise(
        id="glute-bridge", name="Glute Bridge",
        category=STRENGTH, target_area=TargetArea.LEGS, difficulty=1,
        instructions="Lying on your back with knees bent, drive through the heels to lift the hips.",
        sets="3", reps="12-15",
    ),
    Exercise(
        id="goblet-squat", name="Goblet Squat",
        category=STRENGTH, target_area=TargetArea.LEGS, difficulty=2,
        requires_shoulder_loading=True,
        min_flexion_angle=60,
        instructions="Hold a dumbbell at the chest and squat between the knees.",
        sets="3", reps="10-12",
    ),
    Exercise(
        id="split-squat", name="Split Squat",
        category=STRENGTH, target_area=TargetArea.LEGS, difficulty=2,
        instructions="Staggered stance, lower the back knee toward the floor and drive up through the front foot.",
        sets="3", reps="8-10",
    ),
    Exercise(
        id="step-ups", name="Step-Ups",
        category=STRENGTH, target_area=TargetArea.LEGS, difficulty=2,
        instructions="Step onto a knee-height box, stand fully, step down with control.",
        sets="3", reps="10",
    ),
    Exercise(
        id="wall-sit", name="Wall Sit",
        category=STRENGTH, target_area=TargetArea.LEGS, difficulty=2,
        instructions="Back against the wall, thighs parallel to the floor, hold.",
        sets="3", duration="45 sec",
    ),
    Exercise(
        id="heel-taps", name="Supine Heel Taps",
        category=STRENGTH, target_area=TargetArea.CORE, difficulty=1,
        instructions="Lying down with knees bent, lower one heel to tap the floor keeping the low back flat.",
        sets="3", reps="10",
    ),
    Exercise(
        id="standing-marches", name="Standing Marches",
        category=STRENGTH, target_area=TargetArea.CORE, difficulty=1,
        instructions="Stand tall and slowly lift one knee to hip height without leaning.",
        sets="3", reps="12",
    ),
    Exercise(
        id="dead-bug", name="Dead Bug",
        category=STRENGTH, target_area=TargetArea.CORE, difficulty=2,
        min_flexion_angle=90,
        instructions="On your back with arms toward the ceiling, extend opposite arm and leg slowly.",
        sets="3", reps="8",
    ),
    Exercise(
        id="forearm-plank", name="Forearm Plank",
        category=STRENGTH, target_area=TargetArea.CORE, difficulty=3,
        requires_shoulder_loading=True,
        min_flexion_angle=90,
        instructions="Forearms under shoulders, body in a straight line, hold.",
        sets="3", duration="30 sec",
    ),
    Exercise(
        id="kettlebell-swing", name="Kettlebell Swing",
        category=STRENGTH, target_area=TargetArea.FULL_BODY, difficulty=4,
        requires_shoulder_loading=True,
        min_flexion_angle=90,
        instructions="Hinge and drive the hips to float the bell to chest height.",
        sets="4", reps="12",
    ),
    Exercise(
        id="lat-pulldown", name="Lat Pulldown",
        category=STRENGTH, target_area=TargetArea.SHOULDER, difficulty=3,
        requires_overhead=True, requires_shoulder_loading=True,
        min_flexion_angle=150, min_abduction_angle=150,
        instructions="Pull the bar to the upper chest leading with the elbows.",
        sets="3", reps="10",
    ),
    Exercise(
        id="dumbbell-shoulder-press", name="Dumbbell Shoulder Press",
        category=STRENGTH, target_area=TargetArea.SHOULDER, difficulty=4,
        requires_overhead=True, requires_shoulder_loading=True,
        min_flexion_angle=150, min_abduction_angle=150,
        instructions="Press dumbbells overhead from shoulder height.",
        sets="3", reps="8-10",
    ),
)


def get_exercises() -> List[Exercise]:
    return list(EXERCISES)


def get_exercise(exercise_id: str) -> Optional[Exercise]:
    return next((ex for ex in EXERCISES if ex.id == exercise_id), None)


def get_rehab_exercises() -> List[Exercise]:
    """Shoulder recovery work: rehab and mobility entries, in catalog order."""
    return [ex for ex in EXERCISES if ex.category in (REHAB, MOBILITY)]


def get_cardio_exercises() -> List[Exercise]:
    return [ex for ex in EXERCISES if ex.category == CARDIO]


def get_strength_exercises() -> List[Exercise]:
    return [ex for ex in EXERCISES if ex.category == STRENGTH]
