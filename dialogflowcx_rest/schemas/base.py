"""
Base model for Dialogflow CX records.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DialogflowModel(BaseModel):
    """
    Record mirrored from the Dialogflow CX API.

    Fields are snake_case in Python and camelCase on the wire. Every field is
    optional; unset fields are left out when the record is serialized.
    Fields this library does not model are kept and sent back unchanged,
    under the exact key they were given with. Pass such fields in their
    camelCase wire spelling, e.g. ``Agent(newSetting=1)``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        protected_namespaces=(),
    )
