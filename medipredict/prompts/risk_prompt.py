PROMPT_TMPL = (
"Act as an advanced medical diagnostic system (simulating Random Forest/XGBoost logic).\n"
"\n"
"Task: Analyze the following patient data for risk of **{disease_type}**.\n"
"\n"
"Patient Data:\n"
"{patient_data}\n"
"\n"
"Instructions:\n"
"1. Analyze the vital signs and metrics based on standard medical datasets "
"(e.g., Pima Indians Diabetes, Cleveland Heart Disease, Wisconsin Breast Cancer).\n"
"2. Estimate a risk probability (0-100%).\n"
"3. Provide a clinical explanation.\n"
"4. Be realistic but cautious.\n"
"\n"
"IMPORTANT: This is for a simulation/educational tool."
)


# Gemini structured-output 스키마 (OpenAPI subset)
RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "riskScore": {
            "type": "NUMBER",
            "description": "A probability score from 0 to 100 indicating risk level.",
        },
        "riskLevel": {
            "type": "STRING",
            "enum": ["Low", "Moderate", "High", "Critical"],
        },
        "analysis": {
            "type": "STRING",
            "description": "A comprehensive medical analysis of the provided data points.",
        },
        "contributingFactors": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "List of specific metrics that contributed most to the risk score.",
        },
        "recommendations": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "Actionable medical or lifestyle recommendations.",
        },
    },
    "required": ["riskScore", "riskLevel", "analysis", "contributingFactors", "recommendations"],
}
