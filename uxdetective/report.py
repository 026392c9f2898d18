"""
Verification Reports

Condensed, human-auditable projections of analysis results. Nothing here
detects anything: it counts, slices and sorts what the detectors produced.

  - generate_verification_report: one analysis -> summary + evidence snippets
  - generate_summary_stats:       many analyses -> frequencies, averages, timeline
  - summarize_analysis:           one analysis -> severity counts + pattern types
  - filter_by_risk_score / filter_by_pattern_type: in-memory result queries
"""

from __future__ import annotations

from collections import Counter
from typing import Optional, Sequence

from uxdetective.config import settings
from uxdetective.scorer import risk_breakdown, risk_level, round_half_up
from uxdetective.types import AnalysisResult, PatternType, Severity, to_json_value


def _severity_counts(result: AnalysisResult) -> dict[str, int]:
    counts = Counter(Severity(p.severity).value for p in result.patterns)
    return {s.value: counts.get(s.value, 0) for s in Severity}


def generate_verification_report(
    analysis_result: AnalysisResult, snippet_limit: Optional[int] = None,
) -> dict:
    """
    Project one analysis into a verification report.

    Each pattern keeps its first ``snippet_limit`` exact locations (default 3)
    as compact snippets an auditor can check against the page.
    """
    if snippet_limit is None:
        snippet_limit = settings.SNIPPET_LIMIT
    severity = _severity_counts(analysis_result)

    return {
        "url": analysis_result.url,
        "timestamp": analysis_result.timestamp,
        "summary": {
            "totalPatterns": analysis_result.total_patterns,
            "riskScore": analysis_result.risk_score,
            "riskLevel": risk_level(analysis_result.risk_score),
            "highSeverityPatterns": severity["high"],
            "mediumSeverityPatterns": severity["medium"],
            "lowSeverityPatterns": severity["low"],
        },
        "patternDetails": [
            {
                "type": pattern.pattern_type.value,
                "severity": Severity(pattern.severity).value,
                "confidence": pattern.confidence,
                "description": pattern.description,
                "locationCount": len(pattern.exact_locations),
                "verificationSnippets": [
                    {
                        "source": loc.source.value if loc.source else None,
                        "context": loc.context,
                        "exactMatch": loc.exact_match,
                        "position": loc.start_index,
                    }
                    for loc in pattern.exact_locations[:snippet_limit]
                ],
                "verificationData": to_json_value(pattern.verification_data),
            }
            for pattern in analysis_result.patterns
        ],
        "scoreBreakdown": risk_breakdown(analysis_result.patterns),
    }


def generate_summary_stats(
    analysis_results: Sequence[AnalysisResult], top_n: Optional[int] = None,
) -> dict:
    """Aggregate statistics across many analysed pages."""
    if top_n is None:
        top_n = settings.TOP_PATTERNS

    frequency: Counter[str] = Counter()
    severity_breakdown = {s.value: 0 for s in Severity}
    timeline = []
    total_risk = 0

    for result in analysis_results:
        total_risk += result.risk_score
        for pattern in result.patterns:
            frequency[pattern.pattern_type.value] += 1
            severity_breakdown[Severity(pattern.severity).value] += 1
        timeline.append({
            "timestamp": result.timestamp,
            "url": result.url,
            "riskScore": result.risk_score,
            "patternCount": result.total_patterns,
        })

    count = len(analysis_results)
    # Counter.most_common keeps first-seen order among equal counts
    most_common = [
        {"pattern": pattern, "count": n}
        for pattern, n in frequency.most_common(top_n)
    ]

    return {
        "totalSites": count,
        "averageRiskScore": round_half_up(total_risk / count) if count else 0,
        "patternFrequency": dict(frequency),
        "severityBreakdown": severity_breakdown,
        "mostCommonPatterns": most_common,
        "timeline": timeline,
    }


def summarize_analysis(analysis_result: AnalysisResult) -> dict:
    """Headline numbers for one analysis."""
    severity = _severity_counts(analysis_result)
    return {
        "totalPatterns": analysis_result.total_patterns,
        "riskScore": analysis_result.risk_score,
        "highSeverityCount": severity["high"],
        "mediumSeverityCount": severity["medium"],
        "lowSeverityCount": severity["low"],
        "patternTypes": [p.pattern_type.value for p in analysis_result.patterns],
    }


def filter_by_risk_score(
    analysis_results: Sequence[AnalysisResult], min_score: int = 0, max_score: int = 100,
) -> list[AnalysisResult]:
    """Results with min_score <= riskScore <= max_score, riskiest first."""
    matching = [r for r in analysis_results if min_score <= r.risk_score <= max_score]
    return sorted(matching, key=lambda r: r.risk_score, reverse=True)


def filter_by_pattern_type(
    analysis_results: Sequence[AnalysisResult], pattern_type: PatternType | str,
) -> list[AnalysisResult]:
    """Results in which the given pattern was detected, in input order."""
    wanted = PatternType(pattern_type)
    return [
        r for r in analysis_results
        if any(p.pattern_type is wanted for p in r.patterns)
    ]
