import pytest


# A draft that passes every coach step without a warning.
GOOD_DRAFT = {
    "programName": "Reading Forward",
    "granteeOrg": "Literacy Partners Ohio",
    "granteeFocus": "early literacy",
    "location": "Ohio",
    "futureDate": "2031-06-01",
    "archetype": "grant",
    "problem": "Only 41% of third graders in rural Ohio read at grade level today.",
    "beneficiary": "rural third graders",
    "problemScope": "40,000 students in 300 schools",
    "denominatorIncluded": "All third graders in rural Ohio districts",
    "denominatorExcluded": "Charter and private schools",
    "denominatorUnit": "students",
    "denominatorSource": "Ohio Department of Education 2024 enrollment",
    "solution": "Every classroom adopts structured phonics with weekly coaching so teachers change daily reading instruction.",
    "scaleMechanism": "State adoption list and district procurement",
    "evidence": "Phonics schools gained 12 points in one year",
    "evidenceSummary": "A 2023 trial across 48 schools showed 12-point gains",
    "evidenceStrength": "randomized_trial",
    "keyUncertainties": "Coach turnover in remote districts",
    "sinatraWhyUndeniable": "Gains held in the lowest-income districts",
    "headline": "92% of rural third graders read at grade level by 2031 in Ohio",
    "successMetric": "92% reading at grade level",
    "baselineMetric": "41%",
    "comparatorMetric": "68% statewide",
    "metricTimeframe": "by 2031",
    "costPerOutcome": "$310 per student",
    "internalQuote": "This is what our strategy was built to do.",
    "internalSpeaker": "Foundation Leadership",
    "externalQuote": "My daughter went from avoiding books to reading to her little brother every night before bed.",
    "externalSpeaker": "Parent, Athens County",
    "decisionToInform": "Renewal of the literacy portfolio in 2027",
    "keyRisks": "State budget cuts",
    "killCriteria": "No gain after two cohorts",
    "nextExperiment": "Remote coaching in 10 districts",
    "confidence": 65,
}

# Literal scenario used across generator, linter and API tests.
OHIO_RETENTION = {
    "successMetric": "95% retention",
    "beneficiary": "rural students",
    "problemScope": "2 million",
    "futureDate": "2031-06-01",
    "location": "Ohio",
    "headline": "",
}


@pytest.fixture
def good_draft():
    return dict(GOOD_DRAFT)


@pytest.fixture
def ohio_retention():
    return dict(OHIO_RETENTION)
