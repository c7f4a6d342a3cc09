from typing import List, Optional
from datetime import datetime
from pydantic import Field
from app.schemas.base import CamelModel


class RiskAssessment(CamelModel):
    """Impact rating of one risk scenario."""
    scenario: str
    financial_impact: str
    reputational_impact: str
    compliance_impact: str


class AssessmentFields(CamelModel):
    """Per-question answer fields, one cluster per questionnaire topic."""

    # General organization information
    remote_work_percentage: Optional[str] = None

    # Privacy and compliance
    gdpr_compliance: Optional[str] = None
    breach_reporting_required: Optional[str] = None
    breach_notification_required: Optional[str] = None
    compliance_acts: Optional[List[str]] = None

    # Sensitive data handling
    sensitive_client_data: Optional[str] = None
    government_data: Optional[str] = None
    confidential_commercial_data: Optional[str] = None

    # Impact risk assessment
    risk_assessments: Optional[List[RiskAssessment]] = None

    # Incident history
    past_incidents: Optional[str] = None

    # Cyber risk assessment
    cyber_risk_assessment_done: Optional[str] = None
    risk_assessment_internal: Optional[str] = None
    last_risk_assessment: Optional[str] = None
    risk_register_maintained: Optional[str] = None
    risk_register_updated: Optional[str] = None
    third_party_risks_considered: Optional[str] = None

    # Password policy
    password_policy: Optional[str] = None
    password_policy_reviewed: Optional[str] = None
    password_requirements: Optional[List[str]] = None

    # Two factor authentication
    mfa_email: Optional[str] = None
    mfa_remote_access: Optional[str] = None
    single_sign_on: Optional[str] = None

    # Encryption
    data_encrypted_in_transit_internet: Optional[str] = None
    data_encrypted_in_transit_internal: Optional[str] = None
    encryption_key_management: Optional[List[str]] = None
    data_encrypted_at_rest: Optional[str] = None

    # Anti virus
    antivirus_required: Optional[str] = None
    antimalware_required: Optional[str] = None
    ids_ips_used: Optional[str] = None
    ids_ips_details: Optional[str] = None
    antivirus_monitoring: Optional[str] = None

    # Access control management
    access_control_policy: Optional[str] = None
    access_control_policy_reviewed: Optional[str] = None
    remote_access_policy: Optional[str] = None
    remote_access_policy_reviewed: Optional[str] = None
    access_control_tools: Optional[str] = None
    network_segmentation: Optional[str] = None

    # Awareness training
    annual_training: Optional[str] = None
    periodic_training: Optional[str] = None
    phishing_tests: Optional[str] = None
    training_provider: Optional[str] = None
    employee_engagement: Optional[str] = None
    retention_assessment: Optional[str] = None

    # Vulnerability management
    vulnerability_scanning: Optional[str] = None
    scanning_frequency: Optional[str] = None
    patch_management: Optional[str] = None
    vulnerability_remediation: Optional[str] = None

    # Disaster recovery and business continuity
    disaster_recovery_policy: Optional[str] = None
    dr_policy_updated: Optional[str] = None
    dr_testing: Optional[str] = None
    data_restore_testing: Optional[str] = None
    business_continuity_plan: Optional[str] = None
    bcp_updated: Optional[str] = None
    bcp_testing: Optional[str] = None
    incident_response_plan: Optional[str] = None
    irp_updated: Optional[str] = None
    irp_testing: Optional[str] = None
    penetration_testing: Optional[str] = None
    pen_testing_annual: Optional[str] = None
    pen_testing_third_party: Optional[str] = None
    pen_testing_accredited: Optional[str] = None
    pen_testing_scope: Optional[str] = None
    findings_remediation: Optional[str] = None

    # Security framework and ISMS
    security_framework: Optional[str] = None
    primary_framework: Optional[str] = None
    framework_status: Optional[str] = None
    policy_review_frequency: Optional[str] = None
    third_party_procedures: Optional[str] = None

    # SIEM
    breach_detection_tools: Optional[str] = None
    siem_soc_used: Optional[str] = None
    security_solutions: Optional[str] = None

    # Supporting details and evidence
    encryption_key_mgmt_details: Optional[str] = None
    ids_ips_details_2: Optional[str] = None
    access_control_tools_details: Optional[str] = None
    training_schedule: Optional[str] = None
    training_attendance: Optional[str] = None
    periodic_training_details: Optional[str] = None
    phishing_test_details: Optional[str] = None
    training_provider_details: Optional[str] = None
    vulnerability_scanning_evidence: Optional[str] = None
    patch_management_details: Optional[str] = None
    dr_policy_document: Optional[str] = None
    bcp_document: Optional[str] = None
    irp_document: Optional[str] = None
    penetration_testing_details: Optional[str] = None
    framework_evidence: Optional[str] = None
    policy_review_details: Optional[str] = None
    third_party_procedures_details: Optional[str] = None
    siem_details: Optional[str] = None
    soc_details: Optional[str] = None
    assistance_required: Optional[str] = None


class AssessmentCreate(AssessmentFields):
    user_id: int = Field(..., gt=0)
    year: int = Field(..., ge=2000, le=2100)


class AssessmentUpdate(AssessmentFields):
    """Partial update. Completion is only reachable through ``/complete``."""
    pass


class Assessment(AssessmentFields):
    id: int
    user_id: int
    year: int
    is_completed: bool
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
