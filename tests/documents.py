"""YAML documents shared by the tests."""

VALID_ANNOUNCEMENT = """\
announcement:
  number: MFA Order No. 5
  title: Decision on countermeasures against Todd Stein and Miles Yu
  date: 2022-12-23
  issuing_authority: Ministry of Foreign Affairs
  list_type: anti_sanctions
sanction_details:
  reason: Interference in internal affairs
  entities:
    - type: person
      names:
        - english: Miles Yu
          chinese: 余茂春
          is_primary: true
    - type: person
      names:
        - english: Todd Stein
  measures: &measures
    - asset_freeze
    - entry_ban
"""

INVALID_ANNOUNCEMENT = """\
announcement:
  number: MFA Order No. 6
  title: Decision on countermeasures
  date: 2023-04-07
sanction_details:
  entities:
    - type: person
      names:
        - english: Someone
"""

VALID_MODIFICATION = """\
announcement:
  number: UEL Notice 2023-1
  title: Suspension of measures
  date: 2023-01-10
measure_modifications:
  - action: suspend
    target_announcement: UEL Notice 2022-3
    effective_date: 2023-01-10
"""

VALID_LEGAL_INSTRUMENT = """\
title: Anti-Foreign Sanctions Law of the People's Republic of China
short_name: AFSL
content: Article 1 This Law is enacted to safeguard national sovereignty.
enacted_date: 2021-06-10
"""

UNPARSABLE = """\
announcement:
  number: [unclosed
  title: broken
"""

