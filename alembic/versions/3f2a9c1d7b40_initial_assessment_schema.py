"""initial_assessment_schema

Revision ID: 3f2a9c1d7b40
Revises:
Create Date: 2025-06-02 10:14:27.512903

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

json_type = sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), 'postgresql')


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('full_name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('company', sa.String(), nullable=False),
        sa.Column('position', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=False),
        sa.Column('employee_count', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=False)

    op.create_table('questions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('section', sa.String(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_questions_section'), 'questions', ['section'], unique=False)

    op.create_table('options',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('question_id', sa.Integer(), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('value', sa.String(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['question_id'], ['questions.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('assessments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.Column('is_completed', sa.Boolean(), nullable=False),
        sa.Column('remote_work_percentage', sa.Text(), nullable=True),
        sa.Column('gdpr_compliance', sa.Text(), nullable=True),
        sa.Column('breach_reporting_required', sa.Text(), nullable=True),
        sa.Column('breach_notification_required', sa.Text(), nullable=True),
        sa.Column('compliance_acts', json_type, nullable=True),
        sa.Column('sensitive_client_data', sa.Text(), nullable=True),
        sa.Column('government_data', sa.Text(), nullable=True),
        sa.Column('confidential_commercial_data', sa.Text(), nullable=True),
        sa.Column('risk_assessments', json_type, nullable=True),
        sa.Column('past_incidents', sa.Text(), nullable=True),
        sa.Column('cyber_risk_assessment_done', sa.Text(), nullable=True),
        sa.Column('risk_assessment_internal', sa.Text(), nullable=True),
        sa.Column('last_risk_assessment', sa.Text(), nullable=True),
        sa.Column('risk_register_maintained', sa.Text(), nullable=True),
        sa.Column('risk_register_updated', sa.Text(), nullable=True),
        sa.Column('third_party_risks_considered', sa.Text(), nullable=True),
        sa.Column('password_policy', sa.Text(), nullable=True),
        sa.Column('password_policy_reviewed', sa.Text(), nullable=True),
        sa.Column('password_requirements', json_type, nullable=True),
        sa.Column('mfa_email', sa.Text(), nullable=True),
        sa.Column('mfa_remote_access', sa.Text(), nullable=True),
        sa.Column('single_sign_on', sa.Text(), nullable=True),
        sa.Column('data_encrypted_transit_internet', sa.Text(), nullable=True),
        sa.Column('data_encrypted_transit_internal', sa.Text(), nullable=True),
        sa.Column('encryption_key_management', json_type, nullable=True),
        sa.Column('data_encrypted_at_rest', sa.Text(), nullable=True),
        sa.Column('antivirus_required', sa.Text(), nullable=True),
        sa.Column('antimalware_required', sa.Text(), nullable=True),
        sa.Column('ids_ips_used', sa.Text(), nullable=True),
        sa.Column('ids_ips_details', sa.Text(), nullable=True),
        sa.Column('antivirus_monitoring', sa.Text(), nullable=True),
        sa.Column('access_control_policy', sa.Text(), nullable=True),
        sa.Column('access_control_policy_reviewed', sa.Text(), nullable=True),
        sa.Column('remote_access_policy', sa.Text(), nullable=True),
        sa.Column('remote_access_policy_reviewed', sa.Text(), nullable=True),
        sa.Column('access_control_tools', sa.Text(), nullable=True),
        sa.Column('network_segmentation', sa.Text(), nullable=True),
        sa.Column('annual_training', sa.Text(), nullable=True),
        sa.Column('periodic_training', sa.Text(), nullable=True),
        sa.Column('phishing_tests', sa.Text(), nullable=True),
        sa.Column('training_provider', sa.Text(), nullable=True),
        sa.Column('employee_engagement', sa.Text(), nullable=True),
        sa.Column('retention_assessment', sa.Text(), nullable=True),
        sa.Column('vulnerability_scanning', sa.Text(), nullable=True),
        sa.Column('scanning_frequency', sa.Text(), nullable=True),
        sa.Column('patch_management', sa.Text(), nullable=True),
        sa.Column('vulnerability_remediation', sa.Text(), nullable=True),
        sa.Column('disaster_recovery_policy', sa.Text(), nullable=True),
        sa.Column('dr_policy_updated', sa.Text(), nullable=True),
        sa.Column('dr_testing', sa.Text(), nullable=True),
        sa.Column('data_restore_testing', sa.Text(), nullable=True),
        sa.Column('business_continuity_plan', sa.Text(), nullable=True),
        sa.Column('bcp_updated', sa.Text(), nullable=True),
        sa.Column('bcp_testing', sa.Text(), nullable=True),
        sa.Column('incident_response_plan', sa.Text(), nullable=True),
        sa.Column('irp_updated', sa.Text(), nullable=True),
        sa.Column('irp_testing', sa.Text(), nullable=True),
        sa.Column('penetration_testing', sa.Text(), nullable=True),
        sa.Column('pen_testing_annual', sa.Text(), nullable=True),
        sa.Column('pen_testing_third_party', sa.Text(), nullable=True),
        sa.Column('pen_testing_accredited', sa.Text(), nullable=True),
        sa.Column('pen_testing_scope', sa.Text(), nullable=True),
        sa.Column('findings_remediation', sa.Text(), nullable=True),
        sa.Column('security_framework', sa.Text(), nullable=True),
        sa.Column('primary_framework', sa.Text(), nullable=True),
        sa.Column('framework_status', sa.Text(), nullable=True),
        sa.Column('policy_review_frequency', sa.Text(), nullable=True),
        sa.Column('third_party_procedures', sa.Text(), nullable=True),
        sa.Column('breach_detection_tools', sa.Text(), nullable=True),
        sa.Column('siem_soc_used', sa.Text(), nullable=True),
        sa.Column('security_solutions', sa.Text(), nullable=True),
        sa.Column('encryption_key_mgmt_details', sa.Text(), nullable=True),
        sa.Column('ids_ips_details_2', sa.Text(), nullable=True),
        sa.Column('access_control_tools_details', sa.Text(), nullable=True),
        sa.Column('training_schedule', sa.Text(), nullable=True),
        sa.Column('training_attendance', sa.Text(), nullable=True),
        sa.Column('periodic_training_details', sa.Text(), nullable=True),
        sa.Column('phishing_test_details', sa.Text(), nullable=True),
        sa.Column('training_provider_details', sa.Text(), nullable=True),
        sa.Column('vulnerability_scanning_evidence', sa.Text(), nullable=True),
        sa.Column('patch_management_details', sa.Text(), nullable=True),
        sa.Column('dr_policy_document', sa.Text(), nullable=True),
        sa.Column('bcp_document', sa.Text(), nullable=True),
        sa.Column('irp_document', sa.Text(), nullable=True),
        sa.Column('penetration_testing_details', sa.Text(), nullable=True),
        sa.Column('framework_evidence', sa.Text(), nullable=True),
        sa.Column('policy_review_details', sa.Text(), nullable=True),
        sa.Column('third_party_procedures_details', sa.Text(), nullable=True),
        sa.Column('siem_details', sa.Text(), nullable=True),
        sa.Column('soc_details', sa.Text(), nullable=True),
        sa.Column('assistance_required', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'year', name='uq_assessments_user_year')
    )

    op.create_table('responses',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('question_id', sa.Integer(), nullable=False),
        sa.Column('answer', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['question_id'], ['questions.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'question_id', name='uq_responses_user_question')
    )

    op.create_table('assessment_files',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('question_id', sa.Integer(), nullable=True),
        sa.Column('file_name', sa.String(), nullable=False),
        sa.Column('file_type', sa.String(), nullable=False),
        sa.Column('file_size', sa.Integer(), nullable=False),
        sa.Column('file_path', sa.String(), nullable=False),
        sa.Column('uploaded_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['question_id'], ['questions.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('assessment_files')
    op.drop_table('responses')
    op.drop_table('assessments')
    op.drop_table('options')
    op.drop_index(op.f('ix_questions_section'), table_name='questions')
    op.drop_table('questions')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
