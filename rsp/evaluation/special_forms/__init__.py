"""Registry of special forms for the rsp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Handlers take (tail, env, context, evaluate_fn).
"""

from rsp.evaluation.special_forms.keywords import QUOTE, LET, DEFINE, IF, FN, REQUIRE
from rsp.evaluation.special_forms.quote_form import quote_form
from rsp.evaluation.special_forms.let_form import let_form
from rsp.evaluation.special_forms.if_form import if_form
from rsp.evaluation.special_forms.fn_form import fn_form
from rsp.evaluation.special_forms.require_form import require_form

SPECIAL_FORMS = {
    QUOTE: quote_form,
    LET: let_form,
    DEFINE: let_form,
    IF: if_form,
    FN: fn_form,
    REQUIRE: require_form,
}
