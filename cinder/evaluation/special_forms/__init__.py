"""Registry of special forms for the Cinder analyzer.

Maps Symbols to handlers that analyze a form with non-standard evaluation
rules. Each handler takes the Analyzer and the form's operand list and
returns a compiled Expr. The analyzer consults this table before treating
a form as an ordinary procedure application.
"""

from cinder.types.symbol import Symbol
from cinder.evaluation.special_forms.quote_form import quote_form
from cinder.evaluation.special_forms.logic_forms import and_form, or_form
from cinder.evaluation.special_forms.if_form import if_form
from cinder.evaluation.special_forms.begin_form import begin_form
from cinder.evaluation.special_forms.define_form import define_form
from cinder.evaluation.special_forms.lambda_form import lambda_form
from cinder.evaluation.special_forms.macro_forms import (
    define_macro_form,
    macroify_form,
    macroexpand_form,
)

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("if"): if_form,
    Symbol("begin"): begin_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("macroify"): macroify_form,
    Symbol("define-macro"): define_macro_form,
    Symbol("macroexpand"): macroexpand_form,
}
