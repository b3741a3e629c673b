"""
Built-in reference exercise catalog.

The hosted builder owns the real catalog; this one ships with the service
so the HTTP layer and the simulation script have something sensible to
score against.  Values are heuristics, not measurements.

Muscle region and movement direction come from :data:`MUSCLES`, so each
entry only states *which* muscles it trains, how much, and in which role.
"""

from __future__ import annotations

from app.catalog.provider import ExerciseCatalog
from app.schemas.exercise import (
    EnergySystem,
    Equipment,
    Exercise,
    ExerciseCategory,
    MovementType,
    MuscleContribution,
    MuscleRegion,
    MuscleRole,
    SkillRequirement,
    VolumePerSet,
)

# ======================================================================
# Muscle metadata
# ======================================================================

U, L, CO = MuscleRegion.UPPER, MuscleRegion.LOWER, MuscleRegion.CORE
PUSH, PULL = MovementType.PUSH, MovementType.PULL
NEU, ABD = MovementType.NEUTRAL, MovementType.ABDUCTION

MUSCLES: dict[str, tuple[MuscleRegion, MovementType]] = {
    "pectoralis_major": (U, PUSH),
    "triceps_brachii": (U, PUSH),
    "anterior_deltoid": (U, PUSH),
    "lateral_deltoid": (U, ABD),
    "posterior_deltoid": (U, PULL),
    "upper_traps": (U, PUSH),
    "lower_traps": (U, PULL),
    "latissimus_dorsi": (U, PULL),
    "rhomboids": (U, PULL),
    "biceps": (U, PULL),
    "forearms": (U, NEU),
    "core": (CO, NEU),
    "erector_spinae": (CO, PULL),
    "quadriceps": (L, PUSH),
    "gluteus_maximus": (L, PUSH),
    "hamstrings": (L, PULL),
    "sartorius": (L, PULL),
    "iliopsoas": (L, PULL),
    "gastrocnemius": (L, PULL),
    "soleus": (L, PULL),
}

PRIME = MuscleRole.PRIME
SEC = MuscleRole.SECONDARY


def _m(muscle_id: str, contribution: float, role: MuscleRole = SEC) -> MuscleContribution:
    region, movement = MUSCLES[muscle_id]
    return MuscleContribution(
        muscle_id=muscle_id,
        contribution=contribution,
        role=role,
        region=region,
        movement_type=movement,
    )


# Aliases for brevity in the table below
ATP = EnergySystem.ATP_CP
GLY = EnergySystem.GLYCOLYTIC
OXI = EnergySystem.OXIDATIVE
SL = SkillRequirement.LOW
SM = SkillRequirement.MODERATE
SH = SkillRequirement.HIGH
Cat = ExerciseCategory
Eq = Equipment

# ======================================================================
# Built-in exercises
# ======================================================================

BUILTIN_EXERCISES: list[Exercise] = [
    # ── Squat / lunge ─────────────────────────────────────────────
    Exercise(
        id="back_squat", name="Back Squat", category=Cat.SQUAT, energy_system=ATP,
        fatigue_index=0.8, cns_demand=0.8, metabolic_demand=0.6, joint_stress=0.6,
        recovery_days=2.5, skill_requirement=SM, compound=True,
        equipment=[Eq.BARBELL, Eq.RACK],
        volume_per_set=VolumePerSet(strength=500, hypertrophy=800),
        muscles=[_m("quadriceps", 0.9, PRIME), _m("gluteus_maximus", 0.7, PRIME),
                 _m("hamstrings", 0.3), _m("erector_spinae", 0.4), _m("core", 0.3)],
    ),
    Exercise(
        id="front_squat", name="Front Squat", category=Cat.SQUAT, energy_system=ATP,
        fatigue_index=0.75, cns_demand=0.75, metabolic_demand=0.55, joint_stress=0.55,
        recovery_days=2.0, skill_requirement=SH, compound=True,
        equipment=[Eq.BARBELL, Eq.RACK],
        volume_per_set=VolumePerSet(strength=400, hypertrophy=650),
        muscles=[_m("quadriceps", 0.95, PRIME), _m("gluteus_maximus", 0.5),
                 _m("core", 0.5), _m("upper_traps", 0.2)],
    ),
    Exercise(
        id="goblet_squat", name="Goblet Squat", category=Cat.SQUAT, energy_system=GLY,
        fatigue_index=0.45, cns_demand=0.35, metabolic_demand=0.5, joint_stress=0.3,
        recovery_days=1.5, skill_requirement=SL, compound=True,
        equipment=[Eq.DUMBBELL, Eq.KETTLEBELL],
        volume_per_set=VolumePerSet(strength=200, hypertrophy=300),
        muscles=[_m("quadriceps", 0.8, PRIME), _m("gluteus_maximus", 0.5), _m("core", 0.4)],
    ),
    Exercise(
        id="leg_press", name="Leg Press", category=Cat.SQUAT, energy_system=GLY,
        fatigue_index=0.55, cns_demand=0.4, metabolic_demand=0.6, joint_stress=0.35,
        recovery_days=1.5, skill_requirement=SL, compound=True,
        equipment=[Eq.MACHINE],
        volume_per_set=VolumePerSet(strength=1200, hypertrophy=1800),
        muscles=[_m("quadriceps", 0.9, PRIME), _m("gluteus_maximus", 0.6)],
    ),
    Exercise(
        id="bulgarian_split_squat", name="Bulgarian Split Squat", category=Cat.LUNGE,
        energy_system=GLY,
        fatigue_index=0.6, cns_demand=0.45, metabolic_demand=0.65, joint_stress=0.4,
        recovery_days=2.0, skill_requirement=SM, compound=True,
        equipment=[Eq.DUMBBELL, Eq.BENCH],
        volume_per_set=VolumePerSet(strength=250, hypertrophy=400),
        muscles=[_m("quadriceps", 0.85, PRIME), _m("gluteus_maximus", 0.7, PRIME),
                 _m("hamstrings", 0.2), _m("core", 0.2)],
    ),
    Exercise(
        id="walking_lunge", name="Walking Lunge", category=Cat.LUNGE, energy_system=GLY,
        fatigue_index=0.5, cns_demand=0.35, metabolic_demand=0.6, joint_stress=0.35,
        recovery_days=1.5, skill_requirement=SL, compound=True,
        equipment=[Eq.DUMBBELL],
        volume_per_set=VolumePerSet(strength=200, hypertrophy=350),
        muscles=[_m("quadriceps", 0.8, PRIME), _m("gluteus_maximus", 0.7, PRIME),
                 _m("hamstrings", 0.3)],
    ),

    # ── Hinge ─────────────────────────────────────────────────────
    Exercise(
        id="deadlift", name="Deadlift", category=Cat.HINGE, energy_system=ATP,
        fatigue_index=0.9, cns_demand=0.9, metabolic_demand=0.6, joint_stress=0.65,
        recovery_days=3.0, skill_requirement=SM, compound=True,
        equipment=[Eq.BARBELL],
        volume_per_set=VolumePerSet(strength=600, hypertrophy=900),
        muscles=[_m("hamstrings", 0.8, PRIME), _m("gluteus_maximus", 0.8, PRIME),
                 _m("erector_spinae", 0.8, PRIME), _m("upper_traps", 0.4),
                 _m("forearms", 0.4), _m("latissimus_dorsi", 0.3)],
    ),
    Exercise(
        id="romanian_deadlift", name="Romanian Deadlift", category=Cat.HINGE, energy_system=GLY,
        fatigue_index=0.7, cns_demand=0.6, metabolic_demand=0.55, joint_stress=0.5,
        recovery_days=2.5, skill_requirement=SM, compound=True,
        equipment=[Eq.BARBELL],
        volume_per_set=VolumePerSet(strength=450, hypertrophy=700),
        muscles=[_m("hamstrings", 0.9, PRIME), _m("gluteus_maximus", 0.7, PRIME),
                 _m("erector_spinae", 0.6)],
    ),
    Exercise(
        id="kettlebell_swing", name="Kettlebell Swing", category=Cat.HINGE, energy_system=GLY,
        fatigue_index=0.5, cns_demand=0.45, metabolic_demand=0.75, joint_stress=0.3,
        recovery_days=1.0, skill_requirement=SM, compound=True,
        equipment=[Eq.KETTLEBELL],
        volume_per_set=VolumePerSet(strength=300, hypertrophy=400),
        muscles=[_m("gluteus_maximus", 0.8, PRIME), _m("hamstrings", 0.7, PRIME),
                 _m("core", 0.4), _m("erector_spinae", 0.4)],
    ),
    Exercise(
        id="hip_thrust", name="Hip Thrust", category=Cat.HINGE_HORIZONTAL, energy_system=GLY,
        fatigue_index=0.5, cns_demand=0.4, metabolic_demand=0.5, joint_stress=0.25,
        recovery_days=1.5, skill_requirement=SL, compound=True,
        equipment=[Eq.BARBELL, Eq.BENCH],
        volume_per_set=VolumePerSet(strength=500, hypertrophy=800),
        muscles=[_m("gluteus_maximus", 0.95, PRIME), _m("hamstrings", 0.4)],
    ),
    Exercise(
        id="leg_curl", name="Leg Curl", category=Cat.OTHER, energy_system=GLY,
        fatigue_index=0.3, cns_demand=0.15, metabolic_demand=0.5, joint_stress=0.2,
        recovery_days=1.5, skill_requirement=SL, compound=False,
        equipment=[Eq.MACHINE],
        volume_per_set=VolumePerSet(strength=150, hypertrophy=250),
        muscles=[_m("hamstrings", 0.95, PRIME), _m("gastrocnemius", 0.2)],
    ),

    # ── Push ──────────────────────────────────────────────────────
    Exercise(
        id="bench_press", name="Bench Press", category=Cat.PUSH_HORIZONTAL, energy_system=ATP,
        fatigue_index=0.7, cns_demand=0.7, metabolic_demand=0.5, joint_stress=0.5,
        recovery_days=2.0, skill_requirement=SM, compound=True,
        equipment=[Eq.BARBELL, Eq.BENCH, Eq.RACK],
        volume_per_set=VolumePerSet(strength=400, hypertrophy=600),
        muscles=[_m("pectoralis_major", 0.9, PRIME), _m("triceps_brachii", 0.6),
                 _m("anterior_deltoid", 0.5)],
    ),
    Exercise(
        id="incline_db_press", name="Incline Dumbbell Press", category=Cat.PUSH_HORIZONTAL,
        energy_system=GLY,
        fatigue_index=0.55, cns_demand=0.5, metabolic_demand=0.55, joint_stress=0.4,
        recovery_days=1.5, skill_requirement=SL, compound=True,
        equipment=[Eq.DUMBBELL, Eq.BENCH],
        volume_per_set=VolumePerSet(strength=250, hypertrophy=400),
        muscles=[_m("pectoralis_major", 0.85, PRIME), _m("anterior_deltoid", 0.6),
                 _m("triceps_brachii", 0.4)],
    ),
    Exercise(
        id="push_up", name="Push-Up", category=Cat.PUSH_HORIZONTAL, energy_system=GLY,
        fatigue_index=0.3, cns_demand=0.2, metabolic_demand=0.45, joint_stress=0.2,
        recovery_days=1.0, skill_requirement=SL, compound=True,
        equipment=[Eq.BODYWEIGHT],
        volume_per_set=VolumePerSet(strength=100, hypertrophy=150),
        muscles=[_m("pectoralis_major", 0.8, PRIME), _m("triceps_brachii", 0.5),
                 _m("anterior_deltoid", 0.4), _m("core", 0.3)],
    ),
    Exercise(
        id="dip", name="Dip", category=Cat.PUSH_HORIZONTAL, energy_system=GLY,
        fatigue_index=0.55, cns_demand=0.45, metabolic_demand=0.5, joint_stress=0.55,
        recovery_days=1.5, skill_requirement=SM, compound=True,
        equipment=[Eq.BAR],
        volume_per_set=VolumePerSet(strength=200, hypertrophy=300),
        muscles=[_m("pectoralis_major", 0.7, PRIME), _m("triceps_brachii", 0.8, PRIME),
                 _m("anterior_deltoid", 0.5)],
    ),
    Exercise(
        id="overhead_press", name="Overhead Press", category=Cat.PUSH_VERTICAL, energy_system=ATP,
        fatigue_index=0.65, cns_demand=0.65, metabolic_demand=0.45, joint_stress=0.55,
        recovery_days=2.0, skill_requirement=SM, compound=True,
        equipment=[Eq.BARBELL, Eq.RACK],
        volume_per_set=VolumePerSet(strength=250, hypertrophy=400),
        muscles=[_m("anterior_deltoid", 0.9, PRIME), _m("lateral_deltoid", 0.5),
                 _m("triceps_brachii", 0.6), _m("upper_traps", 0.3), _m("core", 0.3)],
    ),
    Exercise(
        id="lateral_raise", name="Lateral Raise", category=Cat.PUSH_VERTICAL, energy_system=GLY,
        fatigue_index=0.2, cns_demand=0.1, metabolic_demand=0.45, joint_stress=0.2,
        recovery_days=1.0, skill_requirement=SL, compound=False,
        equipment=[Eq.DUMBBELL],
        volume_per_set=VolumePerSet(strength=60, hypertrophy=100),
        muscles=[_m("lateral_deltoid", 0.9, PRIME), _m("upper_traps", 0.2)],
    ),
    Exercise(
        id="tricep_pushdown", name="Tricep Pushdown", category=Cat.OTHER, energy_system=GLY,
        fatigue_index=0.2, cns_demand=0.1, metabolic_demand=0.45, joint_stress=0.2,
        recovery_days=1.0, skill_requirement=SL, compound=False,
        equipment=[Eq.CABLE],
        volume_per_set=VolumePerSet(strength=100, hypertrophy=150),
        muscles=[_m("triceps_brachii", 0.95, PRIME)],
    ),

    # ── Pull ──────────────────────────────────────────────────────
    Exercise(
        id="barbell_row", name="Barbell Row", category=Cat.PULL_HORIZONTAL, energy_system=GLY,
        fatigue_index=0.65, cns_demand=0.55, metabolic_demand=0.5, joint_stress=0.5,
        recovery_days=2.0, skill_requirement=SM, compound=True,
        equipment=[Eq.BARBELL],
        volume_per_set=VolumePerSet(strength=350, hypertrophy=550),
        muscles=[_m("latissimus_dorsi", 0.8, PRIME), _m("rhomboids", 0.7, PRIME),
                 _m("posterior_deltoid", 0.4), _m("biceps", 0.4), _m("erector_spinae", 0.3)],
    ),
    Exercise(
        id="seated_cable_row", name="Seated Cable Row", category=Cat.PULL_HORIZONTAL,
        energy_system=GLY,
        fatigue_index=0.4, cns_demand=0.3, metabolic_demand=0.5, joint_stress=0.25,
        recovery_days=1.5, skill_requirement=SL, compound=True,
        equipment=[Eq.CABLE],
        volume_per_set=VolumePerSet(strength=250, hypertrophy=400),
        muscles=[_m("latissimus_dorsi", 0.7, PRIME), _m("rhomboids", 0.7, PRIME),
                 _m("biceps", 0.4), _m("lower_traps", 0.3)],
    ),
    Exercise(
        id="face_pull", name="Face Pull", category=Cat.PULL_HORIZONTAL, energy_system=GLY,
        fatigue_index=0.15, cns_demand=0.1, metabolic_demand=0.35, joint_stress=0.1,
        recovery_days=1.0, skill_requirement=SL, compound=False,
        equipment=[Eq.CABLE],
        volume_per_set=VolumePerSet(strength=80, hypertrophy=120),
        muscles=[_m("posterior_deltoid", 0.85, PRIME), _m("rhomboids", 0.5),
                 _m("lower_traps", 0.4)],
    ),
    Exercise(
        id="pull_up", name="Pull-Up", category=Cat.PULL_VERTICAL, energy_system=GLY,
        fatigue_index=0.6, cns_demand=0.55, metabolic_demand=0.5, joint_stress=0.4,
        recovery_days=2.0, skill_requirement=SM, compound=True,
        equipment=[Eq.BAR, Eq.BODYWEIGHT],
        volume_per_set=VolumePerSet(strength=300, hypertrophy=450),
        muscles=[_m("latissimus_dorsi", 0.9, PRIME), _m("biceps", 0.6),
                 _m("rhomboids", 0.4), _m("forearms", 0.3)],
    ),
    Exercise(
        id="lat_pulldown", name="Lat Pulldown", category=Cat.PULL_VERTICAL, energy_system=GLY,
        fatigue_index=0.4, cns_demand=0.3, metabolic_demand=0.5, joint_stress=0.25,
        recovery_days=1.5, skill_requirement=SL, compound=True,
        equipment=[Eq.CABLE, Eq.MACHINE],
        volume_per_set=VolumePerSet(strength=250, hypertrophy=400),
        muscles=[_m("latissimus_dorsi", 0.85, PRIME), _m("biceps", 0.5), _m("rhomboids", 0.3)],
    ),
    Exercise(
        id="bicep_curl", name="Bicep Curl", category=Cat.OTHER, energy_system=GLY,
        fatigue_index=0.2, cns_demand=0.1, metabolic_demand=0.45, joint_stress=0.15,
        recovery_days=1.0, skill_requirement=SL, compound=False,
        equipment=[Eq.DUMBBELL],
        volume_per_set=VolumePerSet(strength=80, hypertrophy=130),
        muscles=[_m("biceps", 0.95, PRIME), _m("forearms", 0.4)],
    ),

    # ── Core / carry ──────────────────────────────────────────────
    Exercise(
        id="plank", name="Plank", category=Cat.BRACE, energy_system=OXI,
        fatigue_index=0.15, cns_demand=0.1, metabolic_demand=0.3, joint_stress=0.1,
        recovery_days=0.5, skill_requirement=SL, compound=False,
        equipment=[Eq.BODYWEIGHT],
        volume_per_set=VolumePerSet(strength=0, hypertrophy=0),
        muscles=[_m("core", 0.9, PRIME), _m("anterior_deltoid", 0.2)],
    ),
    Exercise(
        id="pallof_press", name="Cable Pallof Press", category=Cat.BRACE, energy_system=OXI,
        fatigue_index=0.15, cns_demand=0.15, metabolic_demand=0.25, joint_stress=0.1,
        recovery_days=0.5, skill_requirement=SL, compound=False,
        equipment=[Eq.CABLE],
        volume_per_set=VolumePerSet(strength=40, hypertrophy=60),
        muscles=[_m("core", 0.95, PRIME)],
    ),
    Exercise(
        id="farmers_carry", name="Farmer's Carry", category=Cat.CARRY, energy_system=GLY,
        fatigue_index=0.5, cns_demand=0.4, metabolic_demand=0.6, joint_stress=0.3,
        recovery_days=1.5, skill_requirement=SL, compound=True,
        equipment=[Eq.DUMBBELL, Eq.KETTLEBELL],
        volume_per_set=VolumePerSet(strength=300, hypertrophy=300),
        muscles=[_m("forearms", 0.8, PRIME), _m("upper_traps", 0.7, PRIME),
                 _m("core", 0.6), _m("gluteus_maximus", 0.3)],
    ),

    # ── Power ─────────────────────────────────────────────────────
    Exercise(
        id="box_jump", name="Box Jump", category=Cat.JUMP, energy_system=ATP,
        fatigue_index=0.45, cns_demand=0.7, metabolic_demand=0.3, joint_stress=0.45,
        recovery_days=1.5, skill_requirement=SM, compound=True,
        equipment=[Eq.BOX],
        volume_per_set=VolumePerSet(strength=50, hypertrophy=50),
        muscles=[_m("quadriceps", 0.7, PRIME), _m("gluteus_maximus", 0.7, PRIME),
                 _m("gastrocnemius", 0.5)],
    ),
    Exercise(
        id="hill_sprint", name="Hill Sprint", category=Cat.SPRINT, energy_system=ATP,
        fatigue_index=0.6, cns_demand=0.8, metabolic_demand=0.7, joint_stress=0.5,
        recovery_days=2.0, skill_requirement=SM, compound=True,
        equipment=[],
        volume_per_set=VolumePerSet(strength=0, hypertrophy=0),
        muscles=[_m("hamstrings", 0.8, PRIME), _m("gluteus_maximus", 0.8, PRIME),
                 _m("quadriceps", 0.6), _m("gastrocnemius", 0.5)],
    ),
    Exercise(
        id="med_ball_slam", name="Medicine Ball Slam", category=Cat.THROW, energy_system=ATP,
        fatigue_index=0.4, cns_demand=0.6, metabolic_demand=0.5, joint_stress=0.25,
        recovery_days=1.0, skill_requirement=SL, compound=True,
        equipment=[Eq.OTHER],
        volume_per_set=VolumePerSet(strength=60, hypertrophy=60),
        muscles=[_m("core", 0.7, PRIME), _m("latissimus_dorsi", 0.6),
                 _m("triceps_brachii", 0.3)],
    ),
    Exercise(
        id="rowing_erg", name="Rowing Ergometer", category=Cat.OTHER, energy_system=OXI,
        fatigue_index=0.4, cns_demand=0.2, metabolic_demand=0.8, joint_stress=0.2,
        recovery_days=1.0, skill_requirement=SM, compound=True,
        equipment=[Eq.MACHINE],
        volume_per_set=VolumePerSet(strength=0, hypertrophy=0),
        muscles=[_m("latissimus_dorsi", 0.5), _m("quadriceps", 0.5), _m("hamstrings", 0.4),
                 _m("biceps", 0.3)],
    ),
]


def default_catalog() -> ExerciseCatalog:
    """A fresh :class:`ExerciseCatalog` over :data:`BUILTIN_EXERCISES`."""
    return ExerciseCatalog(BUILTIN_EXERCISES)
