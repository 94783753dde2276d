"""Registry of the named analytical queries served by the dashboard API.

Every statement is a literal, parameterless SELECT written for MySQL. The only
client-controlled input is the lookup key, which is never interpolated into SQL.
"""
from types import MappingProxyType
from typing import Mapping, Optional

from app.analytics.errors import InvalidQuery


_QUERIES = {
    "countryNameLength": """
    SELECT
      country AS Name,
      LENGTH(country) AS NameLength
    FROM customers
    GROUP BY country
    ORDER BY NameLength DESC
    """,

    "customerNameLength": """
    SELECT
      customerName,
      LENGTH(customerName) AS NameLength,
      country
    FROM customers
    ORDER BY NameLength DESC
    LIMIT 50
    """,

    "productNameAnalysis": """
    SELECT
      productName,
      LENGTH(productName) AS NameLength,
      (LENGTH(productName) - LENGTH(REPLACE(productName, ' ', '')) + 1) AS WordCount,
      productLine
    FROM products
    ORDER BY NameLength DESC
    LIMIT 50
    """,

    "employeeNamePatterns": """
    SELECT
      CONCAT(firstName, ' ', lastName) AS FullName,
      LENGTH(firstName) AS FirstNameLength,
      LENGTH(lastName) AS LastNameLength,
      LENGTH(CONCAT(firstName, lastName)) AS TotalLength,
      jobTitle
    FROM employees
    ORDER BY TotalLength DESC
    """,

    "cityNameLength": """
    SELECT
      city AS CityName,
      LENGTH(city) AS NameLength,
      country,
      COUNT(*) AS OfficeCount
    FROM offices
    GROUP BY city, country
    ORDER BY NameLength DESC
    """,

    "productNameStartChars": """
    SELECT
      LEFT(productName, 1) AS StartChar,
      COUNT(*) AS Frequency
    FROM products
    GROUP BY StartChar
    ORDER BY Frequency DESC
    """,

    "customerNameEndings": """
    SELECT
      RIGHT(customerName, 3) AS Ending,
      COUNT(*) AS Frequency
    FROM customers
    GROUP BY Ending
    HAVING Frequency > 1
    ORDER BY Frequency DESC
    LIMIT 20
    """,

    "productLineAnalysis": """
    SELECT
      productLine,
      LENGTH(productLine) AS NameLength,
      COUNT(*) AS ProductCount,
      AVG(LENGTH(productName)) AS AvgProductNameLength
    FROM products
    GROUP BY productLine
    ORDER BY NameLength DESC
    """,

    "emailDomainAnalysis": """
    SELECT
      SUBSTRING_INDEX(email, '@', -1) AS Domain,
      COUNT(*) AS EmployeeCount
    FROM employees
    GROUP BY Domain
    ORDER BY EmployeeCount DESC
    """,

    "contactNamePatterns": """
    SELECT
      contactFirstName,
      contactLastName,
      LENGTH(contactFirstName) AS FirstNameLength,
      LENGTH(contactLastName) AS LastNameLength,
      country
    FROM customers
    ORDER BY (LENGTH(contactFirstName) + LENGTH(contactLastName)) DESC
    LIMIT 50
    """,

    "productNamePatterns": """
    SELECT
      productName,
      productLine,
      CASE
        WHEN productName LIKE '%Classic%' THEN 'Contains Classic'
        WHEN productName LIKE '%Vintage%' THEN 'Contains Vintage'
        WHEN productName LIKE '%Collectible%' THEN 'Contains Collectible'
        ELSE 'Other'
      END AS PatternCategory
    FROM products
    ORDER BY productName
    """,

    "addressLengthAnalysis": """
    SELECT
      city,
      country,
      LENGTH(addressLine1) AS AddressLength,
      CASE
        WHEN addressLine2 IS NOT NULL THEN LENGTH(addressLine2)
        ELSE 0
      END AS AddressLine2Length
    FROM offices
    ORDER BY AddressLength DESC
    """,

    "jobTitleAnalysis": """
    SELECT
      jobTitle,
      LENGTH(jobTitle) AS TitleLength,
      COUNT(*) AS EmployeeCount
    FROM employees
    GROUP BY jobTitle
    ORDER BY TitleLength DESC
    """,

    "customerNameWordCount": """
    SELECT
      customerName,
      (LENGTH(customerName) - LENGTH(REPLACE(customerName, ' ', '')) + 1) AS WordCount,
      country
    FROM customers
    ORDER BY WordCount DESC, customerName
    LIMIT 50
    """,

    "vendorNameAnalysis": """
    SELECT
      productVendor,
      LENGTH(productVendor) AS VendorNameLength,
      COUNT(*) AS ProductCount
    FROM products
    GROUP BY productVendor
    ORDER BY VendorNameLength DESC
    """,


    "productNameCharFrequency": """
    SELECT
      productLine,
      SUM(LENGTH(productName) - LENGTH(REPLACE(LOWER(productName), 'a', ''))) AS CharA,
      SUM(LENGTH(productName) - LENGTH(REPLACE(LOWER(productName), 'e', ''))) AS CharE,
      SUM(LENGTH(productName) - LENGTH(REPLACE(LOWER(productName), 'i', ''))) AS CharI,
      SUM(LENGTH(productName) - LENGTH(REPLACE(LOWER(productName), 'o', ''))) AS CharO,
      SUM(LENGTH(productName) - LENGTH(REPLACE(LOWER(productName), 'u', ''))) AS CharU
    FROM products
    GROUP BY productLine
    """,

    "customerNameComplexity": """
    SELECT
      customerName,
      LENGTH(customerName) AS Length,
      (LENGTH(customerName) - LENGTH(REPLACE(customerName, ' ', '')) + 1) AS WordCount,
      (LENGTH(customerName) - LENGTH(REPLACE(customerName, UPPER(SUBSTRING(customerName, 1, 1)), ''))) AS CapitalCount,
      (LENGTH(customerName) + (LENGTH(customerName) - LENGTH(REPLACE(customerName, ' ', '')) + 1) * 2) AS ComplexityScore,
      country
    FROM customers
    ORDER BY ComplexityScore DESC
    LIMIT 50
    """,

    "productNameSimilarity": """
    SELECT
      productLine,
      COUNT(*) AS TotalProducts,
      COUNT(DISTINCT LEFT(productName, 5)) AS UniquePrefixes,
      COUNT(*) / COUNT(DISTINCT LEFT(productName, 5)) AS SimilarityRatio
    FROM products
    GROUP BY productLine
    ORDER BY SimilarityRatio DESC
    """,

    "employeeNameDiversity": """
    SELECT
      o.city,
      o.country,
      COUNT(DISTINCT e.firstName) AS UniqueFirstNames,
      COUNT(DISTINCT e.lastName) AS UniqueLastNames,
      COUNT(*) AS TotalEmployees,
      COUNT(DISTINCT e.firstName) / COUNT(*) AS FirstNameDiversity,
      COUNT(DISTINCT e.lastName) / COUNT(*) AS LastNameDiversity
    FROM employees e
    JOIN offices o ON e.officeCode = o.officeCode
    GROUP BY o.city, o.country
    ORDER BY FirstNameDiversity DESC
    """,

    # Title_Case only matches a capitalised first letter followed by lower case,
    # so multi-word names are reported as Mixed_Case.
    "customerNameCapitalization": """
    SELECT
      CASE
        WHEN customerName = UPPER(customerName) THEN 'ALL_CAPS'
        WHEN customerName = LOWER(customerName) THEN 'all_lower'
        WHEN customerName = CONCAT(UPPER(LEFT(customerName, 1)), LOWER(SUBSTRING(customerName, 2))) THEN 'Title_Case'
        ELSE 'Mixed_Case'
      END AS CapitalizationPattern,
      COUNT(*) AS Frequency
    FROM customers
    GROUP BY CapitalizationPattern
    ORDER BY Frequency DESC
    """,

    "productNameSpecialChars": """
    SELECT
      productLine,
      COUNT(*) AS TotalProducts,
      SUM(CASE WHEN productName LIKE '%&%' THEN 1 ELSE 0 END) AS HasAmpersand,
      SUM(CASE WHEN productName LIKE '%-%' THEN 1 ELSE 0 END) AS HasHyphen,
      SUM(CASE WHEN productName LIKE '%''%' THEN 1 ELSE 0 END) AS HasApostrophe,
      SUM(CASE WHEN productName LIKE '%.%' THEN 1 ELSE 0 END) AS HasPeriod,
      SUM(CASE WHEN productName REGEXP '[0-9]' THEN 1 ELSE 0 END) AS HasNumbers
    FROM products
    GROUP BY productLine
    """,

    "contactNameCorrelation": """
    SELECT
      country,
      AVG(LENGTH(contactFirstName)) AS AvgFirstNameLength,
      AVG(LENGTH(contactLastName)) AS AvgLastNameLength,
      AVG(LENGTH(contactFirstName) + LENGTH(contactLastName)) AS AvgTotalLength,
      COUNT(*) AS CustomerCount
    FROM customers
    GROUP BY country
    HAVING CustomerCount > 1
    ORDER BY AvgTotalLength DESC
    """,

    "productNameReadability": """
    SELECT
      productName,
      LENGTH(productName) AS Length,
      (LENGTH(productName) - LENGTH(REPLACE(productName, ' ', '')) + 1) AS WordCount,
      (LENGTH(productName) - LENGTH(REPLACE(UPPER(productName), LOWER(productName), ''))) AS CapitalLetters,
      CASE
        WHEN LENGTH(productName) <= 20 AND (LENGTH(productName) - LENGTH(REPLACE(productName, ' ', '')) + 1) <= 3 THEN 'High'
        WHEN LENGTH(productName) <= 30 AND (LENGTH(productName) - LENGTH(REPLACE(productName, ' ', '')) + 1) <= 4 THEN 'Medium'
        ELSE 'Low'
      END AS ReadabilityScore,
      productLine
    FROM products
    ORDER BY ReadabilityScore, Length
    LIMIT 50
    """,

    "employeeEmailPatterns": """
    SELECT
      SUBSTRING_INDEX(email, '@', 1) AS EmailPrefix,
      LENGTH(SUBSTRING_INDEX(email, '@', 1)) AS PrefixLength,
      COUNT(*) AS Frequency,
      GROUP_CONCAT(DISTINCT jobTitle) AS JobTitles
    FROM employees
    GROUP BY EmailPrefix, PrefixLength
    ORDER BY Frequency DESC
    LIMIT 20
    """,

    "customerNameGeographic": """
    SELECT
      country,
      COUNT(*) AS TotalCustomers,
      AVG(LENGTH(customerName)) AS AvgNameLength,
      MIN(LENGTH(customerName)) AS MinNameLength,
      MAX(LENGTH(customerName)) AS MaxNameLength,
      STDDEV(LENGTH(customerName)) AS NameLengthStdDev
    FROM customers
    GROUP BY country
    HAVING TotalCustomers > 1
    ORDER BY AvgNameLength DESC
    """,

    "productNameYearPatterns": """
    SELECT
      CASE
        WHEN productName LIKE '%19%' AND productName REGEXP '[0-9]{4}' THEN
          CONCAT('19', SUBSTRING(productName, LOCATE('19', productName) + 2, 2))
        WHEN productName LIKE '%20%' AND productName REGEXP '[0-9]{4}' THEN
          CONCAT('20', SUBSTRING(productName, LOCATE('20', productName) + 2, 2))
        ELSE 'No Year'
      END AS YearFound,
      COUNT(*) AS Frequency,
      productLine
    FROM products
    GROUP BY YearFound, productLine
    HAVING YearFound != 'No Year' AND YearFound IS NOT NULL
    ORDER BY Frequency DESC
    """,

    "customerNameAbbreviations": """
    SELECT
      CASE
        WHEN customerName LIKE '%Inc%' OR customerName LIKE '%Inc.%' THEN 'Inc'
        WHEN customerName LIKE '%Ltd%' OR customerName LIKE '%Ltd.%' THEN 'Ltd'
        WHEN customerName LIKE '%Co%' OR customerName LIKE '%Co.%' THEN 'Co'
        WHEN customerName LIKE '%Corp%' OR customerName LIKE '%Corp.%' THEN 'Corp'
        ELSE 'None'
      END AS AbbreviationType,
      COUNT(*) AS Frequency
    FROM customers
    GROUP BY AbbreviationType
    ORDER BY Frequency DESC
    """,

    "productNameDescriptiveWords": """
    SELECT
      'Classic' AS Word,
      COUNT(*) AS Frequency
    FROM products WHERE productName LIKE '%Classic%'
    UNION ALL
    SELECT 'Vintage', COUNT(*) FROM products WHERE productName LIKE '%Vintage%'
    UNION ALL
    SELECT 'Collectible', COUNT(*) FROM products WHERE productName LIKE '%Collectible%'
    UNION ALL
    SELECT 'Limited', COUNT(*) FROM products WHERE productName LIKE '%Limited%'
    UNION ALL
    SELECT 'Special', COUNT(*) FROM products WHERE productName LIKE '%Special%'
    UNION ALL
    SELECT 'Premium', COUNT(*) FROM products WHERE productName LIKE '%Premium%'
    ORDER BY Frequency DESC
    """,

    "employeeNameByTitle": """
    SELECT
      jobTitle,
      AVG(LENGTH(firstName)) AS AvgFirstNameLength,
      AVG(LENGTH(lastName)) AS AvgLastNameLength,
      AVG(LENGTH(CONCAT(firstName, lastName))) AS AvgFullNameLength,
      COUNT(*) AS EmployeeCount
    FROM employees
    GROUP BY jobTitle
    ORDER BY AvgFullNameLength DESC
    """,

    "customerNameUniqueness": """
    SELECT
      country,
      COUNT(DISTINCT customerName) AS UniqueNames,
      COUNT(*) AS TotalCustomers,
      COUNT(DISTINCT customerName) / COUNT(*) AS UniquenessRatio
    FROM customers
    GROUP BY country
    HAVING TotalCustomers > 1
    ORDER BY UniquenessRatio DESC
    """,
}

QUERIES: Mapping[str, str] = MappingProxyType(_QUERIES)


def resolve(name: Optional[str]) -> str:
    """Return the SQL registered under `name` or raise InvalidQuery."""
    if not name or name not in QUERIES:
        raise InvalidQuery(name)
    return QUERIES[name]


def query_names():
    return list(QUERIES)
