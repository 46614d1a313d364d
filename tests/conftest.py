import pytest

from growthstats.models import LMSRecord


@pytest.fixture
def standard_lms() -> LMSRecord:
    """Boys weight-for-age style LMS parameters around 12 months."""
    return LMSRecord(age=12, L=0.0220, M=9.8710, S=0.10376)


@pytest.fixture
def sample_table() -> tuple[LMSRecord, ...]:
    """Small irregularly spaced reference table."""
    return (
        LMSRecord(age=0, L=0.3487, M=3.3464, S=0.14602),
        LMSRecord(age=3, L=0.1738, M=6.3762, S=0.11727),
        LMSRecord(age=6, L=0.1195, M=7.9340, S=0.10876),
        LMSRecord(age=12, L=0.0220, M=9.8710, S=0.10376),
        LMSRecord(age=24, L=-0.1070, M=12.1515, S=0.10415),
    )
