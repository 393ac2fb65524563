from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_CHANNEL_BASE, DEFAULT_MESSAGE_SIGNATURE, DEFAULT_PUBLIC_BASE_URL, DEFAULT_WEEK_NUMBER
from .core.enums import SignatureScheme
from .database.connection import DBConfig, DatabaseConnection
from .links.builder import CapabilityLinkBuilder
from .notifications.composer import MessageComposer
from .notifications.delivery import DeliveryStateUpdater
from .notifications.workflow import NotificationWorkflow
from .signing.service import SignatureService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    students_repo: StudentRepository

    signature_service: SignatureService
    link_builder: CapabilityLinkBuilder
    composer: MessageComposer
    delivery_updater: DeliveryStateUpdater
    notification_workflow: NotificationWorkflow
    student_service: StudentService


def build_services(
    students_repo: StudentRepository,
    *,
    signing_secret: str,
    signature_scheme: str = SignatureScheme.SHA256_PREFIX.value,
    public_base_url: str = DEFAULT_PUBLIC_BASE_URL,
    channel_base: str = DEFAULT_CHANNEL_BASE,
    message_signature: str = DEFAULT_MESSAGE_SIGNATURE,
    default_week: int = DEFAULT_WEEK_NUMBER,
) -> Container:
    signature_service = SignatureService(signing_secret, scheme=signature_scheme)
    link_builder = CapabilityLinkBuilder(signature_service, default_origin=public_base_url)
    composer = MessageComposer(link_builder, channel_base=channel_base, signature_line=message_signature)
    delivery_updater = DeliveryStateUpdater(students_repo)
    notification_workflow = NotificationWorkflow(
        students_repo,
        composer,
        delivery_updater,
        default_week=default_week,
    )
    student_service = StudentService(students_repo, signature_service, link_builder)

    return Container(
        students_repo=students_repo,
        signature_service=signature_service,
        link_builder=link_builder,
        composer=composer,
        delivery_updater=delivery_updater,
        notification_workflow=notification_workflow,
        student_service=student_service,
    )


def build_container(*, db_config: dict, settings) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        MySQLStudentRepository(conn),
        signing_secret=getattr(settings, "LINK_SIGNING_SECRET"),
        signature_scheme=getattr(settings, "SIGNATURE_SCHEME", SignatureScheme.SHA256_PREFIX.value),
        public_base_url=getattr(settings, "PUBLIC_BASE_URL", DEFAULT_PUBLIC_BASE_URL),
        channel_base=getattr(settings, "MESSAGE_CHANNEL_BASE", DEFAULT_CHANNEL_BASE),
        message_signature=getattr(settings, "MESSAGE_SIGNATURE", DEFAULT_MESSAGE_SIGNATURE),
        default_week=int(getattr(settings, "DEFAULT_WEEK_NUMBER", DEFAULT_WEEK_NUMBER)),
    )
