from types import MappingProxyType
from typing import Mapping, Tuple


# Queries each dashboard page loads, in display order.
PAGES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "overview": (
        "countryNameLength",
        "customerNameLength",
        "productNameAnalysis",
        "employeeNamePatterns",
        "cityNameLength",
        "productNameStartChars",
    ),
    "customers": (
        "customerNameLength",
        "countryNameLength",
        "contactNamePatterns",
        "customerNameWordCount",
        "customerNameEndings",
        "customerNameComplexity",
        "customerNameCapitalization",
        "customerNameGeographic",
        "customerNameAbbreviations",
        "customerNameUniqueness",
        "contactNameCorrelation",
    ),
    "products": (
        "productNameAnalysis",
        "productNameStartChars",
        "productLineAnalysis",
        "vendorNameAnalysis",
        "productNamePatterns",
        "productNameCharFrequency",
        "productNameSimilarity",
        "productNameSpecialChars",
        "productNameReadability",
        "productNameYearPatterns",
        "productNameDescriptiveWords",
    ),
    "employees": (
        "employeeNamePatterns",
        "emailDomainAnalysis",
        "jobTitleAnalysis",
        "employeeNameDiversity",
        "employeeNameByTitle",
        "employeeEmailPatterns",
    ),
    "offices": (
        "cityNameLength",
        "addressLengthAnalysis",
    ),
    "analytics": (
        "productNameCharFrequency",
        "customerNameComplexity",
        "productNameSimilarity",
        "employeeNameDiversity",
        "customerNameCapitalization",
        "productNameSpecialChars",
        "contactNameCorrelation",
        "productNameReadability",
        "employeeEmailPatterns",
        "customerNameGeographic",
    ),
})


def page_queries(page: str) -> Tuple[str, ...]:
    """Query names for `page`; raises KeyError for unknown pages."""
    return PAGES[page]
