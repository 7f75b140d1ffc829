"""Deterministic, network-free responder used when no live provider is available."""

import json
import re
from itertools import cycle, islice

UNMATCHED_RESPONSE = "Unable to generate content for this prompt."

MOCK_TOPICS = ["Material Properties", "Crystal Structure", "Mechanical Behavior"]

MOCK_MEMORY_TECHNIQUE = (
    "Split the compound into its parts and picture each part as an object in a single scene."
)

MOCK_QUIZ_POOL = [
    {
        "question": "What is the primary mechanism of plastic deformation in metals?",
        "options": ["Vacancy diffusion", "Dislocation motion", "Grain boundary sliding", "Phase transformation"],
        "correctAnswer": 1,
        "explanation": "Plastic deformation in metals occurs primarily through dislocation motion along slip planes.",
        "difficulty": "medium",
    },
    {
        "question": "Which crystal structure has the highest packing efficiency?",
        "options": ["Simple cubic", "Body-centered cubic", "Face-centered cubic", "Hexagonal"],
        "correctAnswer": 2,
        "explanation": "FCC and HCP both reach a packing efficiency of 74%, the highest possible for equal spheres.",
        "difficulty": "hard",
    },
    {
        "question": "What type of point defect occurs when an atom is missing from its lattice site?",
        "options": ["Interstitial", "Vacancy", "Substitutional", "Dislocation"],
        "correctAnswer": 1,
        "explanation": "A vacancy is a point defect where an atom is missing from its normal lattice position.",
        "difficulty": "easy",
    },
    {
        "question": "What is the primary driving force for diffusion?",
        "options": ["Temperature gradient", "Concentration gradient", "Pressure gradient", "Electric field"],
        "correctAnswer": 1,
        "explanation": "Diffusion is driven by concentration gradients, as described by Fick's first law.",
        "difficulty": "easy",
    },
    {
        "question": "What does Young's modulus represent?",
        "options": ["Yield strength", "Ultimate strength", "Stiffness", "Hardness"],
        "correctAnswer": 2,
        "explanation": "Young's modulus relates stress to strain in the elastic region and measures stiffness.",
        "difficulty": "medium",
    },
    {
        "question": "Why are ceramics generally brittle?",
        "options": ["Low melting point", "High density", "Difficulty in dislocation motion", "Large grain size"],
        "correctAnswer": 2,
        "explanation": "Strong directional bonding makes dislocation motion difficult, which leads to brittle failure.",
        "difficulty": "hard",
    },
]

MOCK_FLASHCARD_POOL = [
    {
        "front": "Elastizitätsmodul",
        "back": "Maß für die Steifigkeit eines Materials - Verhältnis von Spannung zu Dehnung im elastischen Bereich",
        "category": "mechanical_properties",
        "difficulty": "medium",
    },
    {
        "front": "Versetzung",
        "back": "Liniendefekt im Kristallgitter, der die plastische Verformung in Metallen ermöglicht",
        "category": "crystal_defects",
        "difficulty": "medium",
    },
    {
        "front": "Korngrenze",
        "back": "Grenzfläche zwischen zwei Kristallkörnern mit unterschiedlicher Orientierung",
        "category": "microstructure",
        "difficulty": "easy",
    },
    {
        "front": "Leerstelle",
        "back": "Punktdefekt, bei dem ein Atom an seinem normalen Gitterplatz fehlt",
        "category": "crystal_defects",
        "difficulty": "easy",
    },
    {
        "front": "Ficksches Gesetz",
        "back": "J = -D(dC/dx) - Diffusionsfluss proportional zum Konzentrationsgradienten",
        "category": "diffusion",
        "difficulty": "hard",
    },
    {
        "front": "Einheitszelle",
        "back": "Kleinste Wiederholungseinheit eines Kristallgitters",
        "category": "crystal_structures",
        "difficulty": "easy",
    },
]

MOCK_EXAM_POOL = [
    {
        "question": "Which crystal structure has a coordination number of 12?",
        "options": ["Simple cubic", "Body-centered cubic", "Face-centered cubic", "Diamond cubic"],
        "correctAnswer": 2,
        "points": 10,
        "type": "multiple_choice",
        "explanation": "Each atom in an FCC lattice has 12 nearest neighbours.",
    },
    {
        "question": (
            "Calculate the critical resolved shear stress for slip in a single crystal if the applied stress "
            "is 100 MPa and both the slip plane normal and slip direction make 45° with the loading axis."
        ),
        "options": ["35.4 MPa", "50.0 MPa", "70.7 MPa", "100 MPa"],
        "correctAnswer": 1,
        "points": 15,
        "type": "calculation",
        "explanation": "τ = σ · cos(φ) · cos(λ) = 100 MPa · 0.707 · 0.707 = 50 MPa.",
    },
    {
        "question": "Which point defect describes an atom missing from its lattice site?",
        "options": ["Vacancy", "Interstitial", "Frenkel pair", "Edge dislocation"],
        "correctAnswer": 0,
        "points": 5,
        "type": "multiple_choice",
        "explanation": "A vacancy is an empty lattice site.",
    },
    {
        "question": (
            "Derive the relationship between stress and strain for a linear elastic material and explain "
            "the physical meaning of Young's modulus."
        ),
        "options": ["Essay question - detailed derivation required"],
        "correctAnswer": 0,
        "points": 20,
        "type": "essay",
        "explanation": "Requires Hooke's law and an interpretation of material stiffness.",
    },
    {
        "question": "Which mechanism dominates diffusion in metals at moderate temperatures?",
        "options": ["Interstitial", "Vacancy", "Grain boundary", "Surface"],
        "correctAnswer": 1,
        "points": 5,
        "type": "multiple_choice",
        "explanation": "Substitutional atoms move mainly by exchanging places with vacancies.",
    },
    {
        "question": "A steel rod with E = 200 GPa carries 500 MPa. What is the elastic strain?",
        "options": ["0.0025", "0.025", "0.25", "2.5"],
        "correctAnswer": 0,
        "points": 5,
        "type": "calculation",
        "explanation": "ε = σ / E = 500 MPa / 200 GPa = 0.0025.",
    },
]

_COUNT_PATTERN = re.compile(r"exactly\s+(\d+)", re.IGNORECASE)
_QUOTED_PATTERN = re.compile(r'"([^"]+)"')
_QUESTION_LINE_PATTERN = re.compile(r"^QUESTION:\s*(.+)$", re.MULTILINE)


def instruction_line(prompt: str) -> str:
    """Return the instruction paragraph, i.e. everything before the first blank line."""
    return prompt.strip().split("\n\n", 1)[0]


def requested_count(prompt: str, default: int) -> int:
    """Read the requested item count ("exactly N") from the instruction paragraph."""
    match = _COUNT_PATTERN.search(instruction_line(prompt))
    if not match:
        return default
    return max(int(match.group(1)), 1)


def _take(pool: list[dict], count: int) -> list[dict]:
    return [dict(item) for item in islice(cycle(pool), count)]


def mock_response(prompt: str) -> str:
    """
    Produce a fixed, hand-authored response for a prompt.

    Only the instruction paragraph is inspected, so words inside the embedded
    course material never change which payload is returned.

    Args:
        prompt: The prompt that would have been sent to a live provider

    Returns:
        Raw response text (JSON for artifact prompts)
    """
    head = instruction_line(prompt)
    lowered = head.lower()

    if "pronunciation" in lowered:
        match = _QUOTED_PATTERN.search(head)
        term = match.group(1) if match else "Term"
        return f"{term} [pronunciation guide unavailable]"

    if "memory technique" in lowered:
        return MOCK_MEMORY_TECHNIQUE

    if "adapt this question" in lowered:
        match = _QUESTION_LINE_PATTERN.search(prompt)
        return match.group(1).strip() if match else UNMATCHED_RESPONSE

    if "main topics" in lowered:
        return json.dumps(MOCK_TOPICS)

    if "flashcard" in lowered or "anki" in lowered:
        count = requested_count(prompt, len(MOCK_FLASHCARD_POOL))
        return json.dumps({"cards": _take(MOCK_FLASHCARD_POOL, count)}, ensure_ascii=False)

    if "exam" in lowered:
        count = requested_count(prompt, len(MOCK_EXAM_POOL))
        return json.dumps({"questions": _take(MOCK_EXAM_POOL, count)}, ensure_ascii=False)

    if "quiz" in lowered or "questions" in lowered:
        count = requested_count(prompt, len(MOCK_QUIZ_POOL))
        return json.dumps({"questions": _take(MOCK_QUIZ_POOL, count)}, ensure_ascii=False)

    return UNMATCHED_RESPONSE
