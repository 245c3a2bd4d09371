"""
SEPA Validator - Pytest Configuration and Fixtures

Shared sample documents for the validator tests.
"""

import pytest

from sepa_validator.core.config import Config

PAIN_001_NS = "urn:iso:std:iso:20022:tech:xsd:pain.001.001.03"
PAIN_008_NS = "urn:iso:std:iso:20022:tech:xsd:pain.008.001.02"


def build_document(body: str, namespace: str = PAIN_001_NS, root: str = "Document") -> str:
    """Wrap a body in a root element with the given namespace."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<{root} xmlns="{namespace}">{body}</{root}>'
    )


CREDIT_TRANSFER_BODY = """
<CstmrCdtTrfInitn>
  <GrpHdr>
    <MsgId>MSG-001</MsgId>
    <CreDtTm>2024-01-15T10:30:00</CreDtTm>
    <NbOfTxs>1</NbOfTxs>
    <CtrlSum>100.00</CtrlSum>
    <InitgPty><Nm>ACME Corp</Nm></InitgPty>
  </GrpHdr>
  <PmtInf>
    <PmtInfId>PMT-001</PmtInfId>
    <PmtMtd>TRF</PmtMtd>
    <BtchBookg>true</BtchBookg>
    <PmtTpInf><SvcLvl><Cd>SEPA</Cd></SvcLvl></PmtTpInf>
    <ReqdExctnDt>2024-01-16</ReqdExctnDt>
    <Dbtr><Nm>ACME Corp</Nm></Dbtr>
    <DbtrAcct><Id><IBAN>DE89370400440532013000</IBAN></Id></DbtrAcct>
    <CdtTrfTxInf>
      <PmtId><EndToEndId>E2E-001</EndToEndId></PmtId>
      <Amt><InstdAmt Ccy="EUR">100.00</InstdAmt></Amt>
      <Cdtr><Nm>Alice</Nm></Cdtr>
      <CdtrAcct><Id><IBAN>FR7612345</IBAN></Id></CdtrAcct>
      <RmtInf><Ustrd>Invoice 42</Ustrd></RmtInf>
    </CdtTrfTxInf>
  </PmtInf>
</CstmrCdtTrfInitn>
"""

DIRECT_DEBIT_BODY = """
<CstmrDrctDbtInitn>
  <GrpHdr>
    <MsgId>DD-001</MsgId>
    <CreDtTm>2024-01-20T08:00:00</CreDtTm>
    <NbOfTxs>2</NbOfTxs>
    <CtrlSum>80.50</CtrlSum>
  </GrpHdr>
  <PmtInf>
    <PmtInfId>DD-PMT-1</PmtInfId>
    <PmtMtd>DD</PmtMtd>
    <PmtTpInf>
      <SvcLvl><Cd>SEPA</Cd></SvcLvl>
      <LclInstrm><Cd>CORE</Cd></LclInstrm>
      <SeqTp>FRST</SeqTp>
    </PmtTpInf>
    <ReqdColltnDt>2024-02-01</ReqdColltnDt>
    <Cdtr><Nm>Gym Club</Nm></Cdtr>
    <DrctDbtTxInf>
      <InstdAmt Ccy="EUR">50.00</InstdAmt>
      <DrctDbtTx>
        <MndtRltdInf>
          <MndtId>MANDATE-1</MndtId>
          <DtOfSgntr>2023-11-01</DtOfSgntr>
          <AmdmntInd>false</AmdmntInd>
        </MndtRltdInf>
      </DrctDbtTx>
      <Dbtr><Nm>Bob</Nm></Dbtr>
      <DbtrAcct><Id><IBAN>DE89370400440532013000</IBAN></Id></DbtrAcct>
      <RmtInf><Ustrd>Subscription</Ustrd></RmtInf>
    </DrctDbtTxInf>
    <DrctDbtTxInf>
      <InstdAmt Ccy="EUR">30.50</InstdAmt>
      <DrctDbtTx>
        <MndtRltdInf>
          <MndtId>MANDATE-2</MndtId>
          <DtOfSgntr>2023-12-01</DtOfSgntr>
        </MndtRltdInf>
      </DrctDbtTx>
      <DbtrAcct><Id><IBAN>NL91ABNA0417164300</IBAN></Id></DbtrAcct>
    </DrctDbtTxInf>
  </PmtInf>
</CstmrDrctDbtInitn>
"""


@pytest.fixture
def credit_transfer_xml():
    """Valid pain.001 credit transfer with one transaction."""
    return build_document(CREDIT_TRANSFER_BODY, PAIN_001_NS)


@pytest.fixture
def direct_debit_xml():
    """Valid pain.008 direct debit with two transactions and two mandates."""
    return build_document(DIRECT_DEBIT_BODY, PAIN_008_NS)


@pytest.fixture
def test_config():
    """Configuration with fixed schema URLs."""
    config = Config()
    config.schema.credit_transfer_url = "https://schemas.test/pain.001.xsd"
    config.schema.direct_debit_url = "https://schemas.test/pain.008.xsd"
    return config
