import streamlit as st
from datetime import datetime

from core.excel_generator import create_link_report, save_link_report
from core.pipeline import discover_links
from core.results import ResultFileError, ResultsConfig, RESULTS_DIR
from core.scoper import InvalidDomainError

# ───────────────────────────────────────────
# CONFIG
# ───────────────────────────────────────────
st.set_page_config(
    page_title="Linkscope · Link Filter",
    page_icon="🔗",
    layout="wide",
    initial_sidebar_state="collapsed",
)

REASON_LABELS = {
    "blank": "Blank",
    "not_url": "Not a URL",
    "off_domain": "Off domain",
    "image": "Image",
    "duplicate": "Duplicate",
}

st.markdown("""
<style>
.ls-header {
    text-align: center;
    padding: 2.5rem 1rem 1.5rem;
    max-width: 640px;
    margin: 0 auto;
}
.ls-title {
    font-size: 28px;
    font-weight: 700;
    margin: 0 0 0.35rem;
}
.ls-subtitle {
    font-size: 15px;
    color: #6B6B6B;
    margin: 0;
}
.ls-stats {
    display: flex;
    gap: 12px;
    margin: 1rem 0;
}
.ls-stat {
    flex: 1;
    background: #FFFFFF;
    border: 1px solid #E8E8E8;
    border-radius: 10px;
    padding: 14px;
    text-align: center;
}
.ls-stat-value {
    font-size: 24px;
    font-weight: 700;
}
.ls-stat-label {
    font-size: 12px;
    color: #9B9B9B;
}
</style>
""", unsafe_allow_html=True)


# ───────────────────────────────────────────
# SESSION STATE
# ───────────────────────────────────────────
if "report" not in st.session_state:
    st.session_state.report = None


# ───────────────────────────────────────────
# UI
# ───────────────────────────────────────────
st.markdown("""
<div class="ls-header">
    <h1 class="ls-title">Linkscope</h1>
    <p class="ls-subtitle">Paste extracted links. Keep the ones worth crawling.</p>
</div>
""", unsafe_allow_html=True)

col_domain, col_subs = st.columns([3, 1])
with col_domain:
    domain_input = st.text_input("Reference domain", placeholder="blog.example.com")
with col_subs:
    include_subdomains = st.checkbox("Include subdomains", value=False)

links_input = st.text_area(
    "Raw links (one per line)",
    height=220,
    placeholder="https://example.com/about#team\nhttps://cdn.example.com/logo.png",
)

run_btn = st.button("Filter →", disabled=not domain_input or not links_input, use_container_width=True)

if run_btn:
    st.session_state.report = None
    try:
        st.session_state.report = discover_links(
            links_input.splitlines(), domain_input, include_subdomains
        )
    except InvalidDomainError as e:
        st.error(str(e))

# ─── Results ───
report = st.session_state.report
if report:
    st.markdown(f"""
    <div class="ls-stats">
        <div class="ls-stat">
            <div class="ls-stat-value">{report.raw_count}</div>
            <div class="ls-stat-label">Raw links</div>
        </div>
        <div class="ls-stat">
            <div class="ls-stat-value">{len(report.eligible)}</div>
            <div class="ls-stat-label">Eligible</div>
        </div>
        <div class="ls-stat">
            <div class="ls-stat-value">{report.dropped_count}</div>
            <div class="ls-stat-label">Dropped</div>
        </div>
    </div>
    """, unsafe_allow_html=True)

    tab_eligible, tab_dropped, tab_download = st.tabs(["✅ Eligible", "🚫 Dropped", "📥 Download"])

    with tab_eligible:
        if not report.eligible:
            st.info(f"No links on {report.registrable_domain} survived filtering.")
        else:
            st.code("\n".join(report.eligible), language=None)

    with tab_dropped:
        reasons = st.multiselect(
            "Filter by reason",
            list(REASON_LABELS),
            default=list(REASON_LABELS),
            format_func=REASON_LABELS.get,
        )
        rows = [
            {"URL": d["url"], "Reason": REASON_LABELS.get(d["reason"], d["reason"])}
            for d in report.dropped
            if d["reason"] in reasons
        ]
        if not rows:
            st.info("No dropped links match the selected reasons.")
        else:
            st.dataframe(rows, use_container_width=True, hide_index=True)

    with tab_download:
        excel = create_link_report(report)
        fname = f"Links_{report.registrable_domain}_{datetime.now().strftime('%Y%m%d')}.xlsx"

        st.download_button(
            label="📥 Download Excel Report",
            data=excel,
            file_name=fname,
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            use_container_width=True,
        )

        if st.button(f"💾 Save to {RESULTS_DIR}/", use_container_width=True):
            try:
                path = save_link_report(report, ResultsConfig())
                st.success(f"Saved {path}")
            except (ResultFileError, InvalidDomainError) as e:
                st.error(f"Save failed: {e}")
