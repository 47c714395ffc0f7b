from miischeme.excs import (LexError, MiischemeException, RuntimeErrorException,
                            SyntaxErrorException, UndefinedVariable)
from miischeme.messages import CATALOGS, available_languages, render


def test_default_language_is_kirundi():
    assert str(UndefinedVariable('x')) == (
        'Ndababariwe, ariko sinzi ico ‘x’ bivuga. Woba wibagiye kuyishiraho?'
    )


def test_english():
    assert UndefinedVariable('x').render('en') == (
        "Sorry, I don't know what 'x' means. Did you forget to define it?"
    )
    assert SyntaxErrorException('unexpected_close', column=3).render('en') == (
        "Syntax error: unexpected ')' at column 3"
    )
    assert LexError('99999999999999999999', 0).render('en') == (
        "Cannot read '99999999999999999999' at column 0: integer does not fit in 64 bits"
    )


def test_kirundi_reasons():
    exc = RuntimeErrorException('division_by_zero', operator='/')
    assert render(exc, 'rn') == 'Ikibazo igihe ushitseko: ‘/’: ntibishoboka kugabanya na zero'

    exc = SyntaxErrorException('missing_close', column=0)
    assert str(exc) == 'Hari ikosa mu nyandiko: ‘(’ yo ku kibanza 0 ntiyugawe'


def test_every_reason_is_translated():
    assert set(CATALOGS['rn']['reasons']) == set(CATALOGS['en']['reasons'])


def test_reason_falls_back_to_english(monkeypatch):
    monkeypatch.setitem(CATALOGS['en']['reasons'], 'only_in_english', 'untranslated {thing}')
    exc = RuntimeErrorException('only_in_english', thing='x')
    assert render(exc, 'rn') == 'Ikibazo igihe ushitseko: untranslated x'


def test_unknown_language_falls_back_to_english():
    assert render(SyntaxErrorException('empty_input'), 'xx') == (
        'Syntax error: expected an expression, found nothing'
    )


def test_payload_is_structured():
    exc = RuntimeErrorException('not_a_number', operator='+', value='true')
    assert isinstance(exc, MiischemeException)
    assert exc.reason == 'not_a_number'
    assert exc.details == {'operator': '+', 'value': 'true'}


def test_languages():
    assert available_languages() == ['en', 'rn']
