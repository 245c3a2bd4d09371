"""
Tests for summary extraction
"""

from sepa_validator.extraction.extractor import (
    extract,
    extract_header,
    extract_payment,
    extract_transaction,
)
from sepa_validator.extraction.summary import GroupHeaderInfo, TransactionInfo
from sepa_validator.parsing.xml_tree import parse_xml
from sepa_validator.sepa_codes import MessageKind

from sepa_validator.tests.conftest import PAIN_001_NS, PAIN_008_NS, build_document


class TestHeaderExtraction:
    """Tests for group header extraction."""

    def test_header_fields(self, credit_transfer_xml):
        """Test all header fields of a complete document."""
        header = extract_header(parse_xml(credit_transfer_xml))
        assert header == GroupHeaderInfo(
            msg_id="MSG-001",
            creation_date="2024-01-15T10:30:00",
            nb_of_txs="1",
            ctrl_sum="100.00",
        )

    def test_missing_header_fields_are_none(self):
        """Test that absent header children stay None."""
        xml = build_document("<CstmrCdtTrfInitn><GrpHdr><NbOfTxs>3</NbOfTxs></GrpHdr></CstmrCdtTrfInitn>")
        header = extract_header(parse_xml(xml))

        assert header.nb_of_txs == "3"
        assert header.msg_id is None
        assert header.creation_date is None
        assert header.ctrl_sum is None

    def test_empty_header_field_is_empty_string(self):
        """Test that a present but empty element is not coerced to None."""
        xml = build_document("<GrpHdr><MsgId/></GrpHdr>")
        assert extract_header(parse_xml(xml)).msg_id == ""

    def test_no_group_header(self):
        """Test a document without GrpHdr."""
        assert extract_header(parse_xml(build_document("<PmtInf/>"))) == GroupHeaderInfo()

    def test_first_group_header_used(self):
        """Test that only the first GrpHdr is read."""
        xml = build_document("<GrpHdr><MsgId>first</MsgId></GrpHdr><GrpHdr><MsgId>second</MsgId></GrpHdr>")
        assert extract_header(parse_xml(xml)).msg_id == "first"


class TestPaymentExtraction:
    """Tests for payment information extraction."""

    def test_direct_debit_payment(self, direct_debit_xml):
        """Test nested service level and local instrument codes."""
        tree = parse_xml(direct_debit_xml)
        payment = extract_payment(tree.first("PmtInf"))

        assert payment.id == "DD-PMT-1"
        assert payment.method == "DD"
        assert payment.batch is None
        assert payment.service_level == "SEPA"
        assert payment.local_instrument == "CORE"
        assert payment.sequence_type == "FRST"
        assert payment.collection_date == "2024-02-01"

    def test_missing_nested_parent_short_circuits(self):
        """Test that a missing SvcLvl or LclInstrm yields None."""
        xml = build_document("<PmtInf><PmtInfId>P1</PmtInfId><LclInstrm/></PmtInf>")
        payment = extract_payment(parse_xml(xml).first("PmtInf"))

        assert payment.id == "P1"
        assert payment.service_level is None
        assert payment.local_instrument is None

    def test_payments_in_document_order(self):
        """Test one entry per PmtInf, in order."""
        xml = build_document(
            "<PmtInf><PmtInfId>A</PmtInfId></PmtInf><PmtInf><PmtInfId>B</PmtInfId></PmtInf>"
        )
        summary = extract(parse_xml(xml), MessageKind.CREDIT_TRANSFER)
        assert [p.id for p in summary.payments] == ["A", "B"]


class TestTransactionExtraction:
    """Tests for transaction extraction."""

    def test_credit_transfer_transaction(self, credit_transfer_xml):
        """Test creditor fields of a credit transfer."""
        summary = extract(parse_xml(credit_transfer_xml), MessageKind.CREDIT_TRANSFER)

        assert summary.transactions == (
            TransactionInfo(name="Alice", iban="FR7612345", reference="Invoice 42", amount="100.00"),
        )

    def test_direct_debit_transactions(self, direct_debit_xml):
        """Test debtor fields and empty defaults of direct debits."""
        summary = extract(parse_xml(direct_debit_xml), MessageKind.DIRECT_DEBIT)

        assert len(summary.transactions) == 2
        first, second = summary.transactions
        assert first.name == "Bob"
        assert first.iban == "DE89370400440532013000"
        assert first.reference == "Subscription"
        assert first.amount == "50.00"
        assert second.name == ""
        assert second.reference == ""
        assert second.amount == "30.50"

    def test_missing_counterparty_defaults_to_empty_string(self):
        """Test that every missing transaction field is an empty string."""
        xml = build_document("<CdtTrfTxInf/>")
        tx = extract_transaction(parse_xml(xml).first("CdtTrfTxInf"), MessageKind.CREDIT_TRANSFER)

        assert tx == TransactionInfo(name="", iban="", reference="", amount="")
        assert tx.name is not None

    def test_counterparty_without_name(self):
        """Test a Cdtr block lacking Nm."""
        xml = build_document("<CdtTrfTxInf><Cdtr><PstlAdr/></Cdtr></CdtTrfTxInf>")
        tx = extract_transaction(parse_xml(xml).first("CdtTrfTxInf"), MessageKind.CREDIT_TRANSFER)
        assert tx.name == ""

    def test_transactions_independent_of_payments(self):
        """Test that transactions are collected even outside PmtInf."""
        xml = build_document("<CdtTrfTxInf><InstdAmt>1.00</InstdAmt></CdtTrfTxInf>")
        summary = extract(parse_xml(xml), MessageKind.CREDIT_TRANSFER)

        assert summary.payments == ()
        assert [t.amount for t in summary.transactions] == ["1.00"]

    def test_kind_selects_transaction_tag(self, direct_debit_xml):
        """Test that credit transfer extraction ignores debit transactions."""
        summary = extract(parse_xml(direct_debit_xml), MessageKind.CREDIT_TRANSFER)
        assert summary.transactions == ()


class TestMandateExtraction:
    """Tests for mandate extraction."""

    def test_mandates(self, direct_debit_xml):
        """Test mandate fields, with the sequence type read from AmdmntInd."""
        summary = extract(parse_xml(direct_debit_xml), MessageKind.DIRECT_DEBIT)

        assert [m.mandate_id for m in summary.mandates] == ["MANDATE-1", "MANDATE-2"]
        assert summary.mandates[0].signature_date == "2023-11-01"
        assert summary.mandates[0].sequence_type == "false"
        assert summary.mandates[1].sequence_type is None

    def test_sequence_type_ignores_seq_tp(self):
        """Test that the mandate sequence type does not come from SeqTp."""
        xml = build_document(
            "<MndtRltdInf><MndtId>M</MndtId><SeqTp>RCUR</SeqTp></MndtRltdInf>", PAIN_008_NS
        )
        summary = extract(parse_xml(xml), MessageKind.DIRECT_DEBIT)
        assert summary.mandates[0].sequence_type is None

    def test_no_mandates_for_credit_transfer(self):
        """Test that mandates are only extracted for direct debits."""
        xml = build_document("<MndtRltdInf><MndtId>M</MndtId></MndtRltdInf>", PAIN_001_NS)
        assert extract(parse_xml(xml), MessageKind.CREDIT_TRANSFER).mandates == ()


class TestSummarySerialization:
    """Tests for summary to_dict."""

    def test_to_dict_keeps_none(self, direct_debit_xml):
        """Test camelCase keys and preserved None values."""
        data = extract(parse_xml(direct_debit_xml), MessageKind.DIRECT_DEBIT).to_dict()

        assert data["header"]["nbOfTxs"] == "2"
        assert data["payments"][0]["batch"] is None
        assert data["payments"][0]["localInstrument"] == "CORE"
        assert data["transactions"][1]["name"] == ""
        assert data["mandates"][1]["sequenceType"] is None
