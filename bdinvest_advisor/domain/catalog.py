"""Static catalog of Bangladeshi investment instruments"""

from typing import Dict, Optional, Tuple

from bdinvest_advisor.domain.exceptions import UnknownInstrumentError
from bdinvest_advisor.domain.models import (
    Instrument,
    InstrumentCategory,
    InvestmentType,
    RiskLevel,
)

# Order matters: recommendation ties keep catalog order.
INSTRUMENTS: Tuple[Instrument, ...] = (
    Instrument(
        type=InvestmentType.SANCHAYAPATRA,
        name="সঞ্চয়পত্র",
        name_en="Sanchayapatra",
        description="সরকারি সঞ্চয়পত্র - সবচেয়ে নিরাপদ বিনিয়োগ মাধ্যম",
        expected_return=8.5,
        min_investment=1_000,
        max_investment=3_000_000,
        risk_level=RiskLevel.LOW,
        liquidity_days=365,
        tax_benefit=True,
        category=InstrumentCategory.GOVERNMENT,
        provider="বাংলাদেশ সরকার",
        features=("সরকারি গ্যারান্টি", "নিয়মিত সুদ", "কর সুবিধা"),
        pros=(
            "সরকারি গ্যারান্টি",
            "নিশ্চিত রিটার্ন",
            "কর সুবিধা (সীমিত)",
            "মুদ্রাস্ফীতির চেয়ে ভালো রিটার্ন",
        ),
        cons=("তুলনামূলক কম রিটার্ন", "তরলতা সীমিত", "বিনিয়োগ সীমা আছে"),
        eligibility=("বাংলাদেশি নাগরিক", "ন্যূনতম বয়স ১৮ বছর"),
    ),
    Instrument(
        type=InvestmentType.DPS,
        name="DPS",
        name_en="Deposit Pension Scheme",
        description="ব্যাংক ডিপোজিট পেনশন স্কিম - নিয়মিত সঞ্চয়ের জন্য আদর্শ",
        expected_return=7.2,
        min_investment=500,
        risk_level=RiskLevel.LOW,
        liquidity_days=30,
        tax_benefit=False,
        category=InstrumentCategory.BANK,
        provider="বাণিজ্যিক ব্যাংক",
        features=("মাসিক জমা", "পেনশন সুবিধা", "নমনীয় মেয়াদ"),
        pros=(
            "নিয়মিত সঞ্চয়ের অভ্যাস",
            "নিরাপদ বিনিয়োগ",
            "পেনশন পরিকল্পনা",
            "কম পরিমাণ থেকে শুরু",
        ),
        cons=("মুদ্রাস্ফীতির তুলনায় কম রিটার্ন", "সময়ের আগে তোলায় জরিমানা", "ব্যাংক ঝুঁকি"),
        eligibility=("যেকোনো বয়স", "ব্যাংক অ্যাকাউন্ট প্রয়োজন"),
    ),
    Instrument(
        type=InvestmentType.FIXED_DEPOSIT,
        name="ফিক্সড ডিপোজিট",
        name_en="Fixed Deposit",
        description="ব্যাংক ফিক্সড ডিপোজিট - স্বল্পমেয়াদী নিরাপদ বিনিয়োগ",
        expected_return=6.5,
        min_investment=1_000,
        risk_level=RiskLevel.LOW,
        liquidity_days=7,
        tax_benefit=False,
        category=InstrumentCategory.BANK,
        provider="বাণিজ্যিক ব্যাংক",
        features=("নিশ্চিত রিটার্ন", "বিভিন্ন মেয়াদ", "সহজ প্রক্রিয়া"),
        pros=("সম্পূর্ণ নিরাপদ", "নিশ্চিত রিটার্ন", "সহজ প্রক্রিয়া", "বিভিন্ন মেয়াদ"),
        cons=("কম রিটার্ন", "মুদ্রাস্ফীতির ঝুঁকি", "তরলতা সীমিত"),
        eligibility=("ব্যাংক অ্যাকাউন্ট প্রয়োজন",),
    ),
    Instrument(
        type=InvestmentType.MUTUAL_FUND,
        name="মিউচুয়াল ফান্ড",
        name_en="Mutual Fund",
        description="পেশাদার ব্যবস্থাপনায় বিভিন্ন কোম্পানির শেয়ারে বিনিয়োগ",
        expected_return=12.3,
        min_investment=5_000,
        risk_level=RiskLevel.MEDIUM,
        liquidity_days=3,
        tax_benefit=False,
        category=InstrumentCategory.MUTUAL_FUND,
        provider="অ্যাসেট ম্যানেজমেন্ট কোম্পানি",
        features=("পেশাদার ব্যবস্থাপনা", "বৈচিত্র্যময় পোর্টফোলিও", "তরলতা"),
        pros=("পেশাদার ব্যবস্থাপনা", "ঝুঁকি বিভাজন", "ভালো তরলতা", "স্বচ্ছতা"),
        cons=("বাজার ঝুঁকি", "ব্যবস্থাপনা ফি", "রিটার্ন অনিশ্চিত"),
        eligibility=("ন্যূনতম বয়স ১৮ বছর", "KYC সম্পন্ন"),
    ),
    Instrument(
        type=InvestmentType.STOCK,
        name="স্টক মার্কেট",
        name_en="Stock Market",
        description="ঢাকা স্টক এক্সচেঞ্জে তালিকাভুক্ত কোম্পানির শেয়ার",
        expected_return=15.8,
        min_investment=10_000,
        risk_level=RiskLevel.HIGH,
        liquidity_days=1,
        tax_benefit=False,
        category=InstrumentCategory.STOCK,
        provider="ঢাকা স্টক এক্সচেঞ্জ",
        features=("উচ্চ রিটার্ন সম্ভাবনা", "তাৎক্ষণিক ট্রেডিং", "লভ্যাংশ আয়"),
        pros=("উচ্চ রিটার্ন সম্ভাবনা", "তাৎক্ষণিক তরলতা", "লভ্যাংশ আয়", "মালিকানা অধিকার"),
        cons=("উচ্চ ঝুঁকি", "বাজার অস্থিরতা", "গবেষণা প্রয়োজন", "আবেগের প্রভাব"),
        eligibility=("ন্যূনতম বয়স ১৮ বছর", "BO অ্যাকাউন্ট প্রয়োজন"),
    ),
    Instrument(
        type=InvestmentType.BOND,
        name="সরকারি বন্ড",
        name_en="Government Bond",
        description="সরকারি ট্রেজারি বন্ড ও বিল",
        expected_return=7.8,
        min_investment=100_000,
        risk_level=RiskLevel.LOW,
        liquidity_days=30,
        tax_benefit=True,
        category=InstrumentCategory.GOVERNMENT,
        provider="বাংলাদেশ ব্যাংক",
        features=("সরকারি গ্যারান্টি", "নিয়মিত সুদ", "দ্বিতীয়ক বাজার"),
        pros=("সরকারি গ্যারান্টি", "নিয়মিত সুদ প্রদান", "দ্বিতীয়ক বাজারে বিক্রয়", "কর সুবিধা"),
        cons=("উচ্চ ন্যূনতম বিনিয়োগ", "সুদের হার পরিবর্তনের ঝুঁকি", "তরলতা সীমিত"),
        eligibility=("প্রাতিষ্ঠানিক বিনিয়োগকারী", "উচ্চ নেট ওর্থ ব্যক্তি"),
    ),
)

_BY_TYPE: Dict[InvestmentType, Instrument] = {inst.type: inst for inst in INSTRUMENTS}


def all_instruments() -> Tuple[Instrument, ...]:
    """Return the shared, read-only catalog"""
    return INSTRUMENTS


def find_instrument(investment_type: InvestmentType | str) -> Optional[Instrument]:
    """Look up an instrument by type, or None when it is not listed"""
    try:
        return _BY_TYPE.get(InvestmentType(investment_type))
    except ValueError:
        return None


def get_instrument(investment_type: InvestmentType | str) -> Instrument:
    """
    Look up an instrument by type.

    Raises:
        UnknownInstrumentError: If the type is not in the catalog
    """
    instrument = find_instrument(investment_type)
    if instrument is None:
        raise UnknownInstrumentError(f"Unknown investment type: {investment_type}")
    return instrument
