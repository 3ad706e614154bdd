"""
Stakeholder Intake Service
Blueprint registry.

    stakeholder_form_bp   respondent form, authenticated by URL token
    stakeholder_bp        reviewer API, authenticated by JWT
"""
