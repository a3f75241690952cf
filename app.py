"""
SIDSS - Sustainable Infrastructure Decision Support System
Interactive multi-criteria Go/No-Go evaluation dashboard
"""

import json
import logging

import streamlit as st
import plotly.graph_objects as go
import pandas as pd

from sidss import InvalidDesignParametersError, load_model_constants, run_evaluation

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Page config
st.set_page_config(
    page_title="SIDSS Project Evaluation",
    page_icon="🏗️",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.title("🏗️ SIDSS")
st.markdown("**Sustainable Infrastructure Decision Support System** | financial, environmental and social Go/No-Go evaluation")


@st.cache_data
def load_constants():
    return load_model_constants()


constants = load_constants()

DEFAULT_BOQ = pd.DataFrame([
    {"name": "Concrete (C30/37)", "quantity": 5000.0, "unitCost": 120.0, "carbonFactor": 240.0},
    {"name": "Reinforced Steel", "quantity": 500.0, "unitCost": 900.0, "carbonFactor": 1850.0},
    {"name": "Asphalt", "quantity": 1200.0, "unitCost": 80.0, "carbonFactor": 45.0},
])

# Sidebar - Input Parameters
st.sidebar.header("Project Definition")

project_name = st.sidebar.text_input("Project Name", value="New Bridge Project Alpha")
project_type = st.sidebar.selectbox(
    "Type",
    options=["BUILDING", "BRIDGE", "ROAD"],
    index=1,
    format_func=str.title,
)
design_life = st.sidebar.number_input("Design Life (Years)", min_value=0, value=50, step=1)
construction_months = st.sidebar.number_input("Construction (Months)", min_value=0, value=24, step=1)

st.sidebar.markdown("### Financial Parameters")
annual_benefit = st.sidebar.number_input("Annual Benefit ($)", value=250000.0, step=1000.0)
maintenance_cost = st.sidebar.number_input("Maintenance Cost ($/yr)", min_value=0.0, value=15000.0, step=500.0)
discount_rate = st.sidebar.number_input("Discount Rate (0-1)", value=0.05, step=0.01, format="%.3f")
degradation_rate = st.sidebar.number_input("Degradation Rate", value=0.02, step=0.001, format="%.3f")

st.sidebar.markdown("### Social & Policy")
jobs_created = st.sidebar.number_input("Jobs Created", min_value=0, value=150, step=10)
population_served = st.sidebar.number_input("Population Served", min_value=0, value=5000, step=100)
safety_score = st.sidebar.number_input(
    "Safety Score (1-10)",
    value=8.5,
    step=0.5,
    help="Not clamped: values outside 1-10 move the social score proportionally."
)
subsidy_rate = st.sidebar.number_input("Gov Subsidy (%)", value=10.0, step=1.0)
carbon_tax_rate = st.sidebar.number_input("Carbon Tax ($/Ton)", value=25.0, step=1.0)
approval_threshold = st.sidebar.number_input("Approval Threshold", value=60.0, step=1.0)

# === BILL OF QUANTITIES ===
st.subheader("🧱 Bill of Quantities (BOQ)")
boq_df = st.data_editor(
    DEFAULT_BOQ,
    num_rows="dynamic",
    use_container_width=True,
    hide_index=True,
    column_config={
        "name": st.column_config.TextColumn("Material"),
        "quantity": st.column_config.NumberColumn("Quantity"),
        "unitCost": st.column_config.NumberColumn("Unit Cost ($)"),
        "carbonFactor": st.column_config.NumberColumn("Carbon (kgCO2e/unit)"),
    },
    key="boq_editor",
)

# Blank editor cells arrive as NaN; the payload layer turns them into 0
boq_rows = boq_df.astype(object).where(pd.notna(boq_df), None).to_dict("records")

payload = {
    "name": project_name,
    "projectType": project_type,
    "designLifeYears": design_life,
    "constructionDurationMonths": construction_months,
    "boq": boq_rows,
    "maintenance": {
        "annualMaintenanceCost": maintenance_cost,
        "degradationRate": degradation_rate,
    },
    "economics": {
        "discountRate": discount_rate,
        "annualEconomicBenefit": annual_benefit,
    },
    "social": {
        "jobsCreated": jobs_created,
        "populationServed": population_served,
        "safetyScore": safety_score,
    },
    "policy": {
        "subsidyRate": subsidy_rate,
        "carbonTaxRate": carbon_tax_rate,
        "approvalThreshold": approval_threshold,
    },
}

if st.button("RUN EVALUATION", type="primary", use_container_width=True):
    try:
        st.session_state["evaluation"] = run_evaluation(inputs=payload, constants=constants)
    except InvalidDesignParametersError as e:
        st.session_state.pop("evaluation", None)
        st.error(f"Invalid design parameters: {e}")

run = st.session_state.get("evaluation")
if run is not None:
    result = run.result
    fin = result.financial
    env = result.environmental

    # === STATUS + METRICS ROW ===
    st.markdown("---")
    st.subheader(f"Evaluation Report: {result.project_name}")
    if not run.matches(payload):
        st.warning("Inputs changed since this report was generated. Run the evaluation again to refresh it.")
    if result.approved:
        st.success(f"✅ {result.approval_status.value}")
    else:
        st.error(f"⛔ {result.approval_status.value}")

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Final Sustainability Score", f"{result.final_score:.1f} / 100")
    with col2:
        st.metric("NPV", f"${fin.npv:,.0f}")
    with col3:
        st.metric(
            "IRR",
            f"{fin.irr:.2f}%",
            help="Newton-Raphson approximation" + ("" if fin.irr_converged else " (did not converge)")
        )
    with col4:
        st.metric("Carbon Footprint", f"{env.total_carbon_tons:,.0f} tons")

    for note in run.input_warnings + list(result.diagnostics):
        st.warning(note)

    tab1, tab2, tab3, tab4 = st.tabs(["📊 Score Breakdown", "💰 Cash Flows", "🧱 BOQ", "📋 Decision Log"])

    with tab1:
        scores_df = run.table("scores")
        fig_scores = go.Figure(go.Bar(
            x=scores_df["score"],
            y=scores_df["component"],
            orientation="h",
            marker_color=["#3b82f6", "#10b981", "#f59e0b", "#64748b"],
        ))
        fig_scores.update_layout(title="Multi-Criteria Score Breakdown", xaxis=dict(range=[0, 100]))
        st.plotly_chart(fig_scores, use_container_width=True)
        st.dataframe(
            scores_df.style.format({"score": "{:.2f}", "weight": "{:.2f}", "weighted": "{:.2f}"}),
            use_container_width=True,
            hide_index=True,
        )

    with tab2:
        cash_df = run.table("cash_flows")
        fig_cash = go.Figure()
        fig_cash.add_trace(go.Bar(x=cash_df["year"], y=cash_df["present_value"], name="Discounted cash flow"))
        fig_cash.add_trace(go.Scatter(
            x=cash_df["year"], y=cash_df["cumulative_present_value"], mode="lines", name="Cumulative (NPV)"
        ))
        fig_cash.update_layout(title="Life-Cycle Cash Flow", xaxis_title="Year", yaxis_title="$")
        st.plotly_chart(fig_cash, use_container_width=True)

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Initial Investment", f"${fin.initial_investment:,.0f}")
        with col2:
            st.metric("Life-Cycle Cost", f"${fin.life_cycle_cost:,.0f}")
        with col3:
            st.metric("Financial Score", f"{fin.financial_score:.1f}")

        st.dataframe(
            cash_df.style.format({
                "benefit": "${:,.0f}",
                "maintenance": "${:,.0f}",
                "carbon_tax": "${:,.0f}",
                "cash_flow": "${:,.0f}",
                "discount_factor": "{:.4f}",
                "present_value": "${:,.0f}",
                "cumulative_present_value": "${:,.0f}",
            }),
            use_container_width=True,
            hide_index=True,
        )

    with tab3:
        boq_table = run.table("boq")
        st.dataframe(
            boq_table.style.format({
                "quantity": "{:,.2f}",
                "unit_cost": "${:,.2f}",
                "carbon_factor": "{:,.2f}",
                "line_cost": "${:,.0f}",
                "line_carbon_kg": "{:,.0f}",
                "cost_share_pct": "{:.1f}%",
            }),
            use_container_width=True,
            hide_index=True,
        )
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Embodied Carbon", f"{env.material_carbon_tons:,.1f} t")
        with col2:
            st.metric("Operational Carbon", f"{env.operational_carbon_tons:,.1f} t")
        with col3:
            st.metric("Environmental Score", f"{env.environmental_score:.1f}")

    with tab4:
        for line in result.decision_log:
            st.markdown(f"➜ `{line}`")
        w = constants.weights
        st.info(
            f"**Logic Applied:** The final score is a weighted sum: "
            f"{w.financial:g} × Financial + {w.environmental:g} × Environmental + "
            f"{w.social:g} × Social + {w.engineering:g} × Engineering Efficiency. "
            f"Approval is granted if Final Score ≥ {run.request.policy.approval_threshold:g}."
        )
        st.download_button(
            "Download Result (JSON)",
            json.dumps(run.to_dict(), indent=2).encode("utf-8"),
            file_name="evaluation_result.json",
            mime="application/json",
        )

# Footer
st.markdown("---")
st.markdown("**SIDSS Project Evaluation** | Built with Streamlit & Plotly")
