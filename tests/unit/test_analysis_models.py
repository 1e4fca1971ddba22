from resume_audit.analysis.models import AuditDetail, AuditMetric, AuditStatus


class TestAuditDetailParse:
    def test_parses_four_fields(self) -> None:
        detail = AuditDetail.parse(
            "Utilized | Overused buzzword | Spearheaded | Managed, Orchestrated, or Led"
        )
        assert detail == AuditDetail(
            item="Utilized",
            reason="Overused buzzword",
            fix="Spearheaded",
            alternative="Managed, Orchestrated, or Led",
        )

    def test_missing_fields_become_empty(self) -> None:
        detail = AuditDetail.parse("Objective | Outdated heading")
        assert detail.item == "Objective"
        assert detail.reason == "Outdated heading"
        assert detail.fix == ""
        assert detail.alternative == ""

    def test_plain_string_is_item_only(self) -> None:
        assert AuditDetail.parse("Tables") == AuditDetail(item="Tables")

    def test_extra_separators_stay_in_alternative(self) -> None:
        detail = AuditDetail.parse("a | b | c | d | e")
        assert detail.alternative == "d | e"


class TestAuditMetric:
    def test_parsed_details(self) -> None:
        metric = AuditMetric(
            status=AuditStatus.WARNING,
            message="Repeated verbs",
            details=["Managed | Used 5 times | Led | Directed"],
        )
        assert [d.fix for d in metric.parsed_details()] == ["Led"]

    def test_status_compares_to_wire_value(self) -> None:
        assert AuditStatus("fail") is AuditStatus.FAIL
        assert AuditStatus.PASS == "pass"
