"""
Localized rendering of interpreter errors.

Each catalog maps the msg_id of an exception to a frame, and the reason
of an exception to a template; both are formatted with the exception's
details. Reasons missing from a catalog fall back to English.
"""

DEFAULT_LANG = 'rn'
FALLBACK_LANG = 'en'

CATALOGS = {
    'en': {
        'frames': {
            'undefined_variable': "Sorry, I don't know what '{name}' means. "
                                  "Did you forget to define it?",
            'syntax_error': 'Syntax error: {reason}',
            'lex_error': "Cannot read '{fragment}' at column {column}: {reason}",
            'runtime_error': 'Runtime error: {reason}',
        },
        'reasons': {
            'empty_input': 'expected an expression, found nothing',
            'missing_close': "missing closing parenthesis for '(' at column {column}",
            'unexpected_close': "unexpected ')' at column {column}",
            'trailing_tokens': "unexpected tokens after the expression: {fragment}",
            'expected_syntax': 'expected syntax: {syntax}',
            'not_an_identifier': "'{fragment}' cannot be used as a name",
            'duplicate_parameter': "parameter '{name}' appears more than once",
            'integer_overflow': 'integer does not fit in 64 bits',
            'not_a_number': "'{operator}' expects numbers, got {value}",
            'not_an_operator': '{value} is not an operator',
            'arity': "'{operator}' expects {expected} argument(s), got {got}",
            'division_by_zero': "'{operator}' divided by zero",
            'overflow': "'{operator}' overflowed the 64 bit integer range",
            'max_depth': 'maximum evaluation depth ({depth}) exceeded',
            'nesting_too_deep': 'expression is nested too deeply',
        },
    },
    'rn': {
        'frames': {
            'undefined_variable': "Ndababariwe, ariko sinzi ico ‘{name}’ bivuga. "
                                  "Woba wibagiye kuyishiraho?",
            'syntax_error': 'Hari ikosa mu nyandiko: {reason}',
            'lex_error': "Hari ikosa mu nyandiko: ‘{fragment}’ ({column}): {reason}",
            'runtime_error': 'Ikibazo igihe ushitseko: {reason}',
        },
        'reasons': {
            'empty_input': 'hari hitezwe imvugo, nta co nabonye',
            'missing_close': "‘(’ yo ku kibanza {column} ntiyugawe",
            'unexpected_close': "‘)’ itari yitezwe ku kibanza {column}",
            'trailing_tokens': "hari ibindi bisigaye inyuma y'imvugo: {fragment}",
            'expected_syntax': 'uburyo bwitezwe: {syntax}',
            'not_an_identifier': "‘{fragment}’ ntishobora kuba izina",
            'duplicate_parameter': "izina ‘{name}’ risubiwemwo kurenza rimwe",
            'integer_overflow': 'igiharuro kirenze bits 64',
            'not_a_number': "‘{operator}’ yitega ibiharuro, yahawe {value}",
            'not_an_operator': '{value} si igikorwa',
            'arity': "‘{operator}’ yitega ibintu {expected}, yahawe {got}",
            'division_by_zero': "‘{operator}’: ntibishoboka kugabanya na zero",
            'overflow': "‘{operator}’ yarenze urugero rw'ibiharuro vya bits 64",
            'max_depth': "urugero ntarengwa rw'isuzuma ({depth}) rwarenzwe",
            'nesting_too_deep': 'imvugo irimwo ibice vyinjiranye cane',
        },
    },
}


def available_languages():
    return sorted(CATALOGS)


def render_reason(reason, details, lang):
    if reason is None:
        return ''

    catalog = CATALOGS.get(lang, CATALOGS[FALLBACK_LANG])
    template = catalog['reasons'].get(reason)
    if template is None:
        template = CATALOGS[FALLBACK_LANG]['reasons'].get(reason, reason)
    return template.format(**details)


def render(exc, lang=None):
    """ Renders an interpreter exception as human readable text in the given language
    """
    lang = lang or DEFAULT_LANG
    catalog = CATALOGS.get(lang, CATALOGS[FALLBACK_LANG])

    frame = catalog['frames'].get(exc.msg_id)
    if frame is None:
        frame = CATALOGS[FALLBACK_LANG]['frames'].get(exc.msg_id, '{reason}')

    return frame.format(reason=render_reason(exc.reason, exc.details, lang), **exc.details)
