"""
Skill matching between seekers and jobs.

Two separate rules live here and must stay separate:

* `match_score` ranks the seeker job feed. It compares skills exactly as stored
  (case-sensitive) and returns the share of the job's skills the seeker has.
* `find_matching_seekers` builds the notification list returned when a job is
  posted. It lower-cases both sides and flags a seeker on any single overlap.
"""
from typing import Any, Iterable, Sequence, TypeVar

T = TypeVar("T")


def match_score(seeker_skills: Sequence[str] | None, job_skills: Sequence[str]) -> float | None:
    """
    Fraction of `job_skills` present in `seeker_skills`, in [0, 1].

    Duplicates in `job_skills` each count towards both the overlap and the
    denominator. An empty job skill list scores 0. Returns None when there is
    no seeker context (`seeker_skills is None`); an empty list is a known
    seeker with no skills and scores 0.
    """
    if seeker_skills is None:
        return None
    known = set(seeker_skills)
    overlap = sum(1 for skill in job_skills if skill in known)
    return overlap / max(len(job_skills), 1)


def sort_by_match(items: Iterable[T], key=lambda item: item["matchScore"]) -> list[T]:
    """Highest score first; None counts as 0. Stable, so equal scores keep their input order."""
    return sorted(items, key=lambda item: key(item) or 0.0, reverse=True)


def _lowered(skills: Iterable[str]) -> set[str]:
    return {s.lower() for s in skills}


def is_boolean_match(job_skills: Sequence[str], seeker_skills: Sequence[str]) -> bool:
    """True when the two lists share at least one skill, ignoring case."""
    if not job_skills or not seeker_skills:
        return False
    return not _lowered(job_skills).isdisjoint(_lowered(seeker_skills))


def find_matching_seekers(job_skills: Sequence[str], seekers: Iterable[Any]) -> list[Any]:
    """Seekers (anything with a `skill_list`) sharing any skill with the job, input order kept."""
    return [s for s in seekers if is_boolean_match(job_skills, s.skill_list)]
