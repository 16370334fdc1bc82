"""Streamlit UI for JobForge."""
from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from jobforge.config import DATA_DIR, DEFAULT_TEMPLATE, TEMPLATES, ensure_dirs, load_profile, write_profile
from jobforge.cover_letter import resolve_candidate_name
from jobforge.export import COVER_LETTER_FILE, MASTER_CV_FILE, TAILORED_CV_FILE, save_text
from jobforge.importer import import_job_from_link
from jobforge.log import get_logger
from jobforge.models import JobRecord, JobStatus
from jobforge.portfolio import add_item, list_items
from jobforge.resume import import_master_resume, load_master_resume, save_master_resume
from jobforge.tracker import JobStore
from jobforge.workflow import generate_for_job

log = get_logger(__name__)

_CARD_CSS = """
<style>
[data-testid="stMetric"] {
    background: rgba(255,255,255,0.7);
    padding: 0.75rem 1rem;
    border-radius: 12px;
    border: 1px solid #eef0f5;
}
[data-testid="stForm"],
[data-testid="stExpander"] {
    border-radius: 12px;
    border: 1px solid #eef0f5;
}
h1, h2, h3 {
    color: #111827;
}
</style>
"""

# ── Helpers ──────────────────────────────────────────────────────────────


def _store() -> JobStore:
    return JobStore()


def _job_label(job: JobRecord) -> str:
    label = f"{job.title} — {job.company} • {job.status.value}"
    if job.applied_on:
        label += f" • Applied {job.applied_on.isoformat()}"
    return label


def _select_job(job_id: str) -> None:
    st.session_state["selected_job"] = job_id
    st.session_state.pop("generated", None)


def _selected_job(jobs: list[JobRecord]) -> JobRecord | None:
    wanted = st.session_state.get("selected_job")
    for job in jobs:
        if job.id == wanted:
            return job
    return None


def _download(label: str, filename: str, text: str, key: str) -> None:
    st.download_button(label, data=text.encode("utf-8"), file_name=filename,
                       mime="text/plain", key=key, use_container_width=True)


# ── Page: Home ───────────────────────────────────────────────────────────


def page_home() -> None:
    profile = load_profile()
    first_name = (profile["profile"].get("name") or "User").split(" ")[0]
    st.header("JobForge")
    st.caption(f"Welcome, {first_name}")
    st.write(
        "Scan job links, paste descriptions, tailor ATS-ready CVs & cover letters, "
        "build a portfolio, and track every application."
    )

    st.subheader("Scan a job post")
    with st.form("scan"):
        link = st.text_input("Job link (leave empty for demo)", placeholder="https://company.example/jobs/123")
        scan = st.form_submit_button("Scan", type="primary", use_container_width=True)
    if scan:
        job = _store().add(import_job_from_link(link.strip() or None))
        _select_job(job.id)
        st.success(f"Imported **{job.title}** at **{job.company}** — open **Tailor** to generate documents.")

    st.divider()
    st.subheader("Recent jobs")
    for job in _store().load_all():
        c1, c2 = st.columns([5, 1])
        c1.markdown(f"**{job.title}**  \n{job.company} • {job.status.value}"
                    + (f" • Applied {job.applied_on.isoformat()}" if job.applied_on else ""))
        if c2.button("Open", key=f"open_{job.id}"):
            _select_job(job.id)
            st.switch_page(_PAGES["tailor"])


# ── Page: Job description ────────────────────────────────────────────────


def page_job_description() -> None:
    st.header("Paste Job Description")
    st.write("Paste the full job description. Keywords are extracted from it to improve ATS alignment.")

    jobs = _store().load_all()
    if not jobs:
        st.info("No jobs yet — scan a job link on **Home** first.")
        return

    current = _selected_job(jobs) or jobs[0]
    job = st.selectbox("Job", jobs, index=jobs.index(current), format_func=_job_label)
    text = st.text_area("Job description", value=job.description, height=280,
                        placeholder="Paste the job description here…")

    if st.button("Save", type="primary", use_container_width=True):
        _store().cache_description(job.id, text)
        _select_job(job.id)
        st.success("Job description stored for ATS extraction.")


# ── Page: Master CV ──────────────────────────────────────────────────────


def page_master_cv() -> None:
    st.header("Master CV")
    st.write("Paste or edit your master CV — the generator uses this as the base.")

    uploaded = st.file_uploader("Import from file (PDF, DOCX, or TXT)", type=["pdf", "docx", "txt"])
    if uploaded and st.button("Replace master CV with this file"):
        ensure_dirs()
        tmp = DATA_DIR / f"upload_{uploaded.name}"
        tmp.write_bytes(uploaded.getvalue())
        try:
            import_master_resume(tmp)
            st.success("Master CV imported.")
        except Exception as exc:
            st.error(f"Import failed: {exc}")
        finally:
            tmp.unlink(missing_ok=True)

    with st.form("master_cv"):
        text = st.text_area("Master CV", value=load_master_resume(), height=380)
        saved = st.form_submit_button("Save", type="primary", use_container_width=True)
    if saved:
        save_master_resume(text)
        st.success("Master CV updated.")

    c1, c2 = st.columns(2)
    with c1:
        _download("Download TXT", MASTER_CV_FILE, load_master_resume(), key="dl_master")
    with c2:
        if st.button("Save to exports/", use_container_width=True):
            st.info(f"Saved → `{save_text(MASTER_CV_FILE, load_master_resume())}`")
    with st.expander("Copy"):
        st.code(load_master_resume(), language=None)


# ── Page: Tailor ─────────────────────────────────────────────────────────


def page_tailor() -> None:
    st.header("Tailored CV Generator")

    store = _store()
    jobs = store.load_all()
    if not jobs:
        st.info("No jobs yet — scan a job link on **Home** first.")
        return

    current = _selected_job(jobs) or jobs[0]
    job = st.selectbox("Job", jobs, index=jobs.index(current), format_func=_job_label)
    if job.id != st.session_state.get("selected_job"):
        _select_job(job.id)

    st.markdown(f"### {job.title}")
    st.caption(job.company)
    st.markdown("**Parsed requirements**")
    for req in job.requirements:
        st.markdown(f"- {req}")
    if not job.description:
        st.caption("No job description cached — keywords come from the requirements only.")

    profile = load_profile()
    default = profile.get("default_template", DEFAULT_TEMPLATE)
    template = st.selectbox("Template", TEMPLATES,
                            index=TEMPLATES.index(default) if default in TEMPLATES else 0)

    if st.button("Generate Tailored CV & Cover Letter", type="primary", use_container_width=True):
        try:
            st.session_state["generated"] = generate_for_job(
                job,
                load_master_resume(),
                template=template,
                candidate_name=resolve_candidate_name(profile),
            )
            st.success("Tailored CV & Cover Letter created.")
        except Exception as exc:
            log.error("Generation failed for %s: %s", job.id, exc)
            st.error(str(exc))

    generated = st.session_state.get("generated")
    if generated:
        if generated.keywords:
            st.markdown("**ATS keywords:** " + ", ".join(generated.keywords))

        st.subheader("Tailored CV")
        st.code(generated.tailored.text, language=None)
        _download("Download TXT", TAILORED_CV_FILE, generated.tailored.text, key="dl_cv")

        st.subheader("Cover Letter")
        st.code(generated.cover_letter, language=None)
        _download("Download TXT", COVER_LETTER_FILE, generated.cover_letter, key="dl_letter")

    st.divider()
    if st.button("Mark as Applied", use_container_width=True):
        store.mark_applied(job.id)
        st.success(f"Application for “{job.title}” tracked.")
        st.switch_page(_PAGES["tracker"])


# ── Page: Tracker ────────────────────────────────────────────────────────


def page_tracker() -> None:
    st.header("Application Tracker")
    st.write("Track your applications, statuses, and dates.")

    store = _store()
    jobs = store.load_all()
    if not jobs:
        st.info("No applications tracked yet.")
        return

    c1, c2, c3 = st.columns(3)
    c1.metric("Total", len(jobs))
    c2.metric("Applied", sum(1 for j in jobs if j.status is JobStatus.APPLIED))
    c3.metric("Interviews", sum(1 for j in jobs if j.status is JobStatus.INTERVIEW))

    df = pd.DataFrame([
        {
            "title": j.title,
            "company": j.company,
            "status": j.status.value,
            "applied_on": j.applied_on.isoformat() if j.applied_on else "",
            "source_url": j.source_url,
        }
        for j in jobs
    ])
    st.dataframe(df, use_container_width=True, hide_index=True)

    st.divider()
    for job in jobs:
        with st.expander(_job_label(job)):
            cols = st.columns(len(JobStatus) + 1)
            if cols[0].button("Open", key=f"trk_open_{job.id}"):
                _select_job(job.id)
                st.switch_page(_PAGES["tailor"])
            for col, status in zip(cols[1:], JobStatus):
                if col.button(status.value, key=f"trk_{status.value}_{job.id}",
                              disabled=job.status is status):
                    store.update_status(job.id, status)
                    st.rerun()


# ── Page: Portfolio ──────────────────────────────────────────────────────


def page_portfolio() -> None:
    st.header("Portfolio")
    st.write("Add quick highlights recruiters can scan fast.")

    with st.form("portfolio", clear_on_submit=True):
        note = st.text_input("Highlight",
                             placeholder="e.g., Launched analytics dashboard that cut reporting time 40%")
        added = st.form_submit_button("Add Highlight", type="primary", use_container_width=True)
    if added:
        try:
            add_item(note)
        except ValueError as exc:
            st.warning(str(exc))

    st.subheader("Your Highlights")
    items = list_items()
    if not items:
        st.caption("No items yet.")
    for item in items:
        st.markdown(f"- **{item.title}**  \n  _{item.added_at}_")


# ── Page: Profile ────────────────────────────────────────────────────────


def page_profile() -> None:
    st.header("Profile")
    profile = load_profile()
    default = profile.get("default_template", DEFAULT_TEMPLATE)

    with st.form("profile_form"):
        name = st.text_input("Full name (signs your cover letters)", value=profile["profile"].get("name", ""))
        template = st.selectbox("Default template", TEMPLATES,
                                index=TEMPLATES.index(default) if default in TEMPLATES else 0)
        save = st.form_submit_button("Save Profile", type="primary", use_container_width=True)

    if save:
        profile["profile"]["name"] = name.strip()
        profile["default_template"] = template
        write_profile(profile)
        st.success("Profile saved!")


# ── Main ─────────────────────────────────────────────────────────────────


def _wrap(page):
    def run() -> None:
        st.markdown(_CARD_CSS, unsafe_allow_html=True)
        page()

    run.__name__ = page.__name__
    return run


st.set_page_config(page_title="JobForge", page_icon="🛠️")
ensure_dirs()

_PAGES = {
    "home": st.Page(_wrap(page_home), title="Home", icon="🏠", url_path="home", default=True),
    "jd": st.Page(_wrap(page_job_description), title="Job Description", icon="📝", url_path="jd"),
    "cv": st.Page(_wrap(page_master_cv), title="Master CV", icon="📄", url_path="cv"),
    "tailor": st.Page(_wrap(page_tailor), title="Tailor", icon="✂️", url_path="tailor"),
    "tracker": st.Page(_wrap(page_tracker), title="Tracker", icon="📋", url_path="tracker"),
    "portfolio": st.Page(_wrap(page_portfolio), title="Portfolio", icon="⭐", url_path="portfolio"),
    "profile": st.Page(_wrap(page_profile), title="Profile", icon="⚙️", url_path="profile"),
}

nav = st.navigation(list(_PAGES.values()))
nav.run()
