"""
📋 Фиксированные перечисления картотеки.

Значения хранятся в базе как есть (строкой), поэтому порядок и написание
менять нельзя без миграции данных.
"""

INWARD_TYPES = ["Letter", "Application", "Tender", "Invitation"]
INWARD_MODES = ["By Hand", "Tele Call", "Email", "Web Enquiry"]
INWARD_STATUSES = ["Received", "Opened", "Processed", "Rejected"]

SENDER_TYPES = ["Individual", "Department", "Organization"]

GENDERS = ["Male", "Female", "Other", "Unfilled"]
ROLES = ["Admin", "Inward Admin", "Inward User", "Root"]

STATUS_RECEIVED = INWARD_STATUSES[0]
GENDER_UNFILLED = GENDERS[-1]


def as_choices(values):
    """Превращает список значений в choices для полей Django."""
    return [(value, value) for value in values]
