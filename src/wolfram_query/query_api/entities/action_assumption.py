from dataclasses import dataclass


@dataclass(frozen=True)
class ActionAssumption:
    """An assumption alternative ready to be displayed and acted upon.

    - label        : rendered template text, e.g. 'Assuming "dow chemical" is a
                     financial entity. Use as a company instead'
    - action       : token to send back as the ``assumption`` parameter
    - button_label : short name for a button, e.g. "Company"
    - description  : description of the alternative, e.g. "a company"
    """

    label: str
    action: str
    button_label: str
    description: str
