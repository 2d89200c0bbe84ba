from types import MappingProxyType

# -----------------------------
# SYMPTOM -> MEDICINE TABLE
# -----------------------------
MEDICINE_DATA = MappingProxyType({
    "fever": "Paracetamol",
    "headache": "Ibuprofen",
    "cold": "Cetirizine",
    "cough": "Dextromethorphan Syrup",
    "sore throat": "Strepsils Lozenges",
    "diarrhea": "Oral Rehydration Salts (ORS)",
    "acidity": "Omeprazole",
    "constipation": "Lactulose Syrup",
    "allergy": "Loratadine",
    "body pain": "Diclofenac",
    "nausea": "Ondansetron",
    "vomiting": "Domperidone",
    "stomach ache": "Dicyclomine",
    "indigestion": "Antacid Tablet",
    "toothache": "Naproxen",
    "muscle cramps": "Magnesium Supplement",
    "insomnia": "Melatonin",
    "migraine": "Sumatriptan",
})
