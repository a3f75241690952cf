import pytest

from sidss.inputs import (
    BillOfQuantitiesItem,
    EconomicParams,
    MaintenanceParams,
    PolicyParams,
    ProjectRequest,
    ProjectType,
    SocialParams,
)


def make_request(**overrides) -> ProjectRequest:
    """Reference bridge scenario: 5000 units concrete, 50-year design life."""
    fields = dict(
        name="Bridge Alpha",
        project_type=ProjectType.BRIDGE,
        design_life_years=50,
        construction_duration_months=24,
        boq=(BillOfQuantitiesItem("Concrete (C30/37)", 5000, 120, 240),),
        maintenance=MaintenanceParams(annual_maintenance_cost=15000, degradation_rate=0.02),
        economics=EconomicParams(discount_rate=0.05, annual_economic_benefit=250000),
        social=SocialParams(jobs_created=150, population_served=5000, safety_score=8.5),
        policy=PolicyParams(subsidy_rate=10, carbon_tax_rate=25, approval_threshold=60),
    )
    fields.update(overrides)
    return ProjectRequest(**fields)


@pytest.fixture
def scenario_request():
    return make_request()


@pytest.fixture
def scenario_payload():
    return {
        "name": "Bridge Alpha",
        "projectType": "BRIDGE",
        "designLifeYears": 50,
        "constructionDurationMonths": 24,
        "boq": [
            {"name": "Concrete (C30/37)", "quantity": 5000, "unitCost": 120, "carbonFactor": 240},
        ],
        "maintenance": {"annualMaintenanceCost": 15000, "degradationRate": 0.02},
        "economics": {"discountRate": 0.05, "annualEconomicBenefit": 250000},
        "social": {"jobsCreated": 150, "populationServed": 5000, "safetyScore": 8.5},
        "policy": {"subsidyRate": 10, "carbonTaxRate": 25, "approvalThreshold": 60},
    }


@pytest.fixture
def make_project():
    return make_request
