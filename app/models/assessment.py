from typing import Optional, TYPE_CHECKING
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Text, Boolean, DateTime, ForeignKey, UniqueConstraint
from datetime import datetime
from app.db.base import Base, JSONType

if TYPE_CHECKING:
    from app.models.user import User


class Assessment(Base):
    __tablename__ = "assessments"
    __table_args__ = (
        UniqueConstraint("user_id", "year", name="uq_assessments_user_year"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    completed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    is_completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # General organization information
    remote_work_percentage: Mapped[Optional[str]] = mapped_column(Text)

    # Privacy and compliance
    gdpr_compliance: Mapped[Optional[str]] = mapped_column(Text)
    breach_reporting_required: Mapped[Optional[str]] = mapped_column(Text)
    breach_notification_required: Mapped[Optional[str]] = mapped_column(Text)
    compliance_acts: Mapped[Optional[list]] = mapped_column(JSONType)

    # Sensitive data handling
    sensitive_client_data: Mapped[Optional[str]] = mapped_column(Text)
    government_data: Mapped[Optional[str]] = mapped_column(Text)
    confidential_commercial_data: Mapped[Optional[str]] = mapped_column(Text)

    # Impact risk assessment
    risk_assessments: Mapped[Optional[list]] = mapped_column(JSONType)

    # Incident history
    past_incidents: Mapped[Optional[str]] = mapped_column(Text)

    # Cyber risk assessment
    cyber_risk_assessment_done: Mapped[Optional[str]] = mapped_column(Text)
    risk_assessment_internal: Mapped[Optional[str]] = mapped_column(Text)
    last_risk_assessment: Mapped[Optional[str]] = mapped_column(Text)
    risk_register_maintained: Mapped[Optional[str]] = mapped_column(Text)
    risk_register_updated: Mapped[Optional[str]] = mapped_column(Text)
    third_party_risks_considered: Mapped[Optional[str]] = mapped_column(Text)

    # Password policy
    password_policy: Mapped[Optional[str]] = mapped_column(Text)
    password_policy_reviewed: Mapped[Optional[str]] = mapped_column(Text)
    password_requirements: Mapped[Optional[list]] = mapped_column(JSONType)

    # Two factor authentication
    mfa_email: Mapped[Optional[str]] = mapped_column(Text)
    mfa_remote_access: Mapped[Optional[str]] = mapped_column(Text)
    single_sign_on: Mapped[Optional[str]] = mapped_column(Text)

    # Encryption
    data_encrypted_in_transit_internet: Mapped[Optional[str]] = mapped_column(
        "data_encrypted_transit_internet", Text)
    data_encrypted_in_transit_internal: Mapped[Optional[str]] = mapped_column(
        "data_encrypted_transit_internal", Text)
    encryption_key_management: Mapped[Optional[list]] = mapped_column(JSONType)
    data_encrypted_at_rest: Mapped[Optional[str]] = mapped_column(Text)

    # Anti virus
    antivirus_required: Mapped[Optional[str]] = mapped_column(Text)
    antimalware_required: Mapped[Optional[str]] = mapped_column(Text)
    ids_ips_used: Mapped[Optional[str]] = mapped_column(Text)
    ids_ips_details: Mapped[Optional[str]] = mapped_column(Text)
    antivirus_monitoring: Mapped[Optional[str]] = mapped_column(Text)

    # Access control management
    access_control_policy: Mapped[Optional[str]] = mapped_column(Text)
    access_control_policy_reviewed: Mapped[Optional[str]] = mapped_column(Text)
    remote_access_policy: Mapped[Optional[str]] = mapped_column(Text)
    remote_access_policy_reviewed: Mapped[Optional[str]] = mapped_column(Text)
    access_control_tools: Mapped[Optional[str]] = mapped_column(Text)
    network_segmentation: Mapped[Optional[str]] = mapped_column(Text)

    # Awareness training
    annual_training: Mapped[Optional[str]] = mapped_column(Text)
    periodic_training: Mapped[Optional[str]] = mapped_column(Text)
    phishing_tests: Mapped[Optional[str]] = mapped_column(Text)
    training_provider: Mapped[Optional[str]] = mapped_column(Text)
    employee_engagement: Mapped[Optional[str]] = mapped_column(Text)
    retention_assessment: Mapped[Optional[str]] = mapped_column(Text)

    # Vulnerability management
    vulnerability_scanning: Mapped[Optional[str]] = mapped_column(Text)
    scanning_frequency: Mapped[Optional[str]] = mapped_column(Text)
    patch_management: Mapped[Optional[str]] = mapped_column(Text)
    vulnerability_remediation: Mapped[Optional[str]] = mapped_column(Text)

    # Disaster recovery and business continuity
    disaster_recovery_policy: Mapped[Optional[str]] = mapped_column(Text)
    dr_policy_updated: Mapped[Optional[str]] = mapped_column(Text)
    dr_testing: Mapped[Optional[str]] = mapped_column(Text)
    data_restore_testing: Mapped[Optional[str]] = mapped_column(Text)
    business_continuity_plan: Mapped[Optional[str]] = mapped_column(Text)
    bcp_updated: Mapped[Optional[str]] = mapped_column(Text)
    bcp_testing: Mapped[Optional[str]] = mapped_column(Text)
    incident_response_plan: Mapped[Optional[str]] = mapped_column(Text)
    irp_updated: Mapped[Optional[str]] = mapped_column(Text)
    irp_testing: Mapped[Optional[str]] = mapped_column(Text)
    penetration_testing: Mapped[Optional[str]] = mapped_column(Text)
    pen_testing_annual: Mapped[Optional[str]] = mapped_column(Text)
    pen_testing_third_party: Mapped[Optional[str]] = mapped_column(Text)
    pen_testing_accredited: Mapped[Optional[str]] = mapped_column(Text)
    pen_testing_scope: Mapped[Optional[str]] = mapped_column(Text)
    findings_remediation: Mapped[Optional[str]] = mapped_column(Text)

    # Security framework and ISMS
    security_framework: Mapped[Optional[str]] = mapped_column(Text)
    primary_framework: Mapped[Optional[str]] = mapped_column(Text)
    framework_status: Mapped[Optional[str]] = mapped_column(Text)
    policy_review_frequency: Mapped[Optional[str]] = mapped_column(Text)
    third_party_procedures: Mapped[Optional[str]] = mapped_column(Text)

    # SIEM
    breach_detection_tools: Mapped[Optional[str]] = mapped_column(Text)
    siem_soc_used: Mapped[Optional[str]] = mapped_column(Text)
    security_solutions: Mapped[Optional[str]] = mapped_column(Text)

    # Supporting details and evidence
    encryption_key_mgmt_details: Mapped[Optional[str]] = mapped_column(Text)
    ids_ips_details_2: Mapped[Optional[str]] = mapped_column(Text)
    access_control_tools_details: Mapped[Optional[str]] = mapped_column(Text)
    training_schedule: Mapped[Optional[str]] = mapped_column(Text)
    training_attendance: Mapped[Optional[str]] = mapped_column(Text)
    periodic_training_details: Mapped[Optional[str]] = mapped_column(Text)
    phishing_test_details: Mapped[Optional[str]] = mapped_column(Text)
    training_provider_details: Mapped[Optional[str]] = mapped_column(Text)
    vulnerability_scanning_evidence: Mapped[Optional[str]] = mapped_column(Text)
    patch_management_details: Mapped[Optional[str]] = mapped_column(Text)
    dr_policy_document: Mapped[Optional[str]] = mapped_column(Text)
    bcp_document: Mapped[Optional[str]] = mapped_column(Text)
    irp_document: Mapped[Optional[str]] = mapped_column(Text)
    penetration_testing_details: Mapped[Optional[str]] = mapped_column(Text)
    framework_evidence: Mapped[Optional[str]] = mapped_column(Text)
    policy_review_details: Mapped[Optional[str]] = mapped_column(Text)
    third_party_procedures_details: Mapped[Optional[str]] = mapped_column(Text)
    siem_details: Mapped[Optional[str]] = mapped_column(Text)
    soc_details: Mapped[Optional[str]] = mapped_column(Text)
    assistance_required: Mapped[Optional[str]] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    user: Mapped["User"] = relationship(back_populates="assessments")
