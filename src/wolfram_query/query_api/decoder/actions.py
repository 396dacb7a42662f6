# wolfram_query/query_api/decoder/actions.py

from wolfram_query.query_api.decoder.template import render_template
from wolfram_query.query_api.entities.action_assumption import ActionAssumption
from wolfram_query.query_api.entities.assumption import Assumption
from wolfram_query.query_api.errors import NoAssumptionError


def for_action_display(assumption: Assumption) -> list[ActionAssumption]:
    """Turn one assumption into the alternatives a caller can switch to.

    The first value is the interpretation the server applied (``desc1``).
    Every later value becomes one ActionAssumption, in order, whose label is
    the assumption template rendered with ``word``, ``desc1`` and ``desc2``
    (the later value's description). E.g. for 'dow chemical'::

        Assuming "dow chemical" is a financial entity. Use as a company instead

    Raises:
      NoAssumptionError when fewer than two values are present.

    """
    if len(assumption.values) < 2:
        # the first value is the one applied; there has to be more than one to switch
        raise NoAssumptionError("nothing to assume")

    assumed = assumption.values[0].description
    actions: list[ActionAssumption] = []
    for value in assumption.values[1:]:
        label = render_template(
            assumption.template,
            {
                "word": assumption.word,
                "desc1": assumed,
                "desc2": value.description,
            },
        )
        actions.append(
            ActionAssumption(
                label=label,
                action=value.input,
                button_label=value.name,
                description=value.description,
            )
        )
    return actions
