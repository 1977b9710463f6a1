from cmdassist.core.models import FindingKind, Severity
from cmdassist.core.validator import is_valid, validate


def _kinds(cmd: str) -> list[FindingKind]:
    return [f.kind for f in validate(cmd)]


def test_balanced_command_passes():
    findings = validate('echo "hello world"')
    assert findings == []
    assert is_valid(findings)


def test_unmatched_paren():
    assert _kinds("(a b") == [FindingKind.UNMATCHED_PARENTHESES]


def test_matched_paren_passes():
    assert validate("(a b)") == []


def test_unmatched_double_quote():
    assert _kinds('echo "hi') == [FindingKind.UNMATCHED_DOUBLE_QUOTES]


def test_unmatched_single_quote():
    assert _kinds("echo 'hi") == [FindingKind.UNMATCHED_SINGLE_QUOTES]


def test_unmatched_brace():
    assert _kinds("echo ${HOME") == [FindingKind.UNMATCHED_BRACES]


def test_counts_not_order():
    """Closing before opening still balances by count."""
    assert validate(")(") == []


def test_quote_and_paren_both_reported():
    assert _kinds('echo "unbalanced)') == [
        FindingKind.UNMATCHED_DOUBLE_QUOTES,
        FindingKind.UNMATCHED_PARENTHESES,
    ]


def test_all_checks_run_in_fixed_order():
    cmd = "rm -rf / \"'({"
    assert _kinds(cmd) == [
        FindingKind.UNMATCHED_DOUBLE_QUOTES,
        FindingKind.UNMATCHED_SINGLE_QUOTES,
        FindingKind.UNMATCHED_PARENTHESES,
        FindingKind.UNMATCHED_BRACES,
        FindingKind.DANGEROUS_PATTERN,
    ]


def test_dangerous_pattern_fails():
    findings = validate("rm -rf /")
    assert [f.kind for f in findings] == [FindingKind.DANGEROUS_PATTERN]
    assert findings[0].severity is Severity.CRITICAL
    assert findings[0].blocking
    assert not is_valid(findings)


def test_dangerous_pattern_inside_longer_command():
    assert FindingKind.DANGEROUS_PATTERN in _kinds("sudo rm -rf /var/tmp")


def test_dangerous_pattern_requires_exact_spacing():
    assert validate("rm  -rf /") == []
    assert validate("rm -fr /") == []


def test_quoted_dangerous_pattern_still_reported():
    """No quote awareness: the literal inside a string counts."""
    assert FindingKind.DANGEROUS_PATTERN in _kinds("echo 'rm -rf /'")


def test_escaped_quote_is_counted():
    assert _kinds('echo \\"') == [FindingKind.UNMATCHED_DOUBLE_QUOTES]


def test_findings_have_messages():
    findings = validate("(a")
    assert findings[0].message == "Unmatched parentheses detected"
    assert findings[0].severity is Severity.ERROR
