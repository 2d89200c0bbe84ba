from typing import Any, Dict, Optional

from .medicine_data import MEDICINE_DATA

ADULT_DOSAGE = "1 tablet twice daily"
CHILD_DOSAGE = "½ tablet twice daily (consult pediatrician before use)"


def prescribe(symptoms: Optional[str]) -> str:
    """Return the medicine and dosage for a single symptom.

    Unknown or empty symptoms are ordinary outcomes and produce an advisory
    message instead of raising.
    """
    if not symptoms or not symptoms.strip():
        return "Please provide a symptom to analyze."

    key = symptoms.strip().lower()
    med = MEDICINE_DATA.get(key)
    if not med:
        return f'No medicine found for "{symptoms}". Please consult a doctor.'

    return (
        f"For {key}:\n"
        f"Recommended Medicine: {med}\n"
        f"Adult Dosage: {ADULT_DOSAGE}\n"
        f"Child Dosage: {CHILD_DOSAGE}"
    )


class MedicinePrescribeTool:
    name = "MedicinePrescribeTool"
    description = (
        "Given a symptom (like fever, headache, diarrhea, etc.), return the "
        "suitable medicine and dosage for adults and children."
    )
    parameters = {
        "type": "object",
        "properties": {
            "symptoms": {
                "type": "string",
                "description": "The symptom to analyze (e.g. fever, cough)",
            },
        },
        "required": ["symptoms"],
    }

    def invoke(self, arguments: Dict[str, Any]) -> str:
        symptoms = arguments.get("symptoms")
        if symptoms is not None and not isinstance(symptoms, str):
            symptoms = str(symptoms)
        return prescribe(symptoms)


# Capability set declared to the model, keyed by tool name.
TOOLS = {tool.name: tool for tool in (MedicinePrescribeTool(),)}
