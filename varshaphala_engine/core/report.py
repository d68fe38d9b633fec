"""
report.py  —  Plain-text annual report
=======================================
Fixed-width rendering of a ``VarshaphalaResult`` in the result's language.
"""

import textwrap
from typing import List

from .chart import format_degree

WIDTH = 72
RULE = "=" * WIDTH
THIN_RULE = "-" * WIDTH


def _wrap(text: str, indent: str = "  ") -> List[str]:
    return textwrap.wrap(text, width=WIDTH, initial_indent=indent, subsequent_indent=indent)


def _months(months, text, language) -> str:
    if not months:
        return text.render("report.none", language)
    return ", ".join(text.render(f"month.{m}", language) for m in months)


def render_plain_text(result, text) -> str:
    lang = result.language
    chart = result.annual_chart
    r = text.render
    lines = [RULE, r("report.title", lang).center(WIDTH), RULE]

    lines += [
        r("report.year", lang, year=result.year, age=result.age),
        r("report.solar_return", lang,
          when=chart.solar_return_local.strftime("%Y-%m-%d %H:%M:%S")),
        r("report.ascendant", lang,
          sign=text.sign_name(chart.ascendant_sign, lang),
          degree=format_degree(chart.ascendant_degree)),
        r("report.rating", lang, rating=f"{result.year_rating:.2f}"),
        THIN_RULE,
    ]

    yl = result.year_lord
    lines.append(r("report.section.year_lord", lang))
    lines += _wrap(r("report.year_lord_line", lang,
                     planet=text.planet_name(yl.planet, lang), votes=yl.votes,
                     house=yl.house, strength=r(f"strength.{yl.strength.value}", lang)))
    lines += _wrap(yl.narrative)
    lines.append("")

    m = result.muntha
    lines.append(r("report.section.muntha", lang))
    lines += _wrap(r("report.muntha_line", lang,
                     sign=text.sign_name(m.sign, lang), house=m.house,
                     lord=text.planet_name(m.lord, lang), lord_house=m.lord_house))
    lines += _wrap(m.narrative)
    lines.append("")

    lines.append(r("report.section.themes", lang))
    for theme in result.major_themes:
        lines += _wrap(theme, indent="  - ")
    lines.append("")

    lines.append(r("report.section.mudda", lang))
    for period in result.mudda_dasha:
        lines.append("  " + r("report.mudda_line", lang,
                              planet=text.planet_name(period.planet, lang),
                              start=period.start.isoformat(),
                              end=period.end.isoformat(),
                              days=period.days,
                              marker=r("report.current", lang) if period.current else ""))
    lines.append("")

    lines.append(r("report.section.months", lang))
    lines.append("  " + r("report.favorable_months", lang,
                          months=_months(result.favorable_months, text, lang)))
    lines.append("  " + r("report.challenging_months", lang,
                          months=_months(result.challenging_months, text, lang)))
    lines.append("")

    lines.append(r("report.section.overall", lang))
    lines += _wrap(result.overall_prediction)
    lines += [RULE, r("report.footer", lang).center(WIDTH), RULE]
    return "\n".join(lines)
