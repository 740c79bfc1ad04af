"""
MongoDB implementation of AppointmentRepository.
"""

from datetime import date, datetime, time
from typing import List, Optional

from beanie import UpdateResponse
from beanie.odm.operators.update.general import Set

from wellnesshub.application.ports.repositories.appointment_repo import AppointmentRepository
from wellnesshub.domain.entities.appointment import Appointment
from wellnesshub.domain.enums import AppointmentStatus
from wellnesshub.domain.value_objects.time_slot import TimeSlot

from ..models.appointment_m import AppointmentMongo, AppointmentSlotMongo


class MongoAppointmentRepository(AppointmentRepository):
    """MongoDB implementation of AppointmentRepository."""

    async def save(self, appointment: Appointment) -> Appointment:
        appointment_mongo = await self._domain_to_mongo(appointment)
        await appointment_mongo.save()
        return self._mongo_to_domain(appointment_mongo)

    async def find_by_id(self, appointment_id: str) -> Optional[Appointment]:
        appointment_mongo = await AppointmentMongo.find_one(
            AppointmentMongo.appointment_id == appointment_id
        )
        if not appointment_mongo:
            return None
        return self._mongo_to_domain(appointment_mongo)

    async def find_by_practitioner(self, practitioner_id: str) -> List[Appointment]:
        docs = await AppointmentMongo.find(
            AppointmentMongo.practitioner_id == practitioner_id
        ).sort([("date", 1), ("time_slot.start", 1)]).to_list()
        return [self._mongo_to_domain(doc) for doc in docs]

    async def find_by_consumer(self, consumer_id: str) -> List[Appointment]:
        docs = await AppointmentMongo.find(
            AppointmentMongo.consumer_id == consumer_id
        ).sort([("date", -1), ("time_slot.start", -1)]).to_list()
        return [self._mongo_to_domain(doc) for doc in docs]

    async def update_status(
        self, appointment_id: str, status: AppointmentStatus, expected_status: AppointmentStatus
    ) -> Optional[Appointment]:
        # Single find_one_and_update conditioned on the status the caller read
        appointment_mongo = await AppointmentMongo.find_one(
            AppointmentMongo.appointment_id == appointment_id,
            AppointmentMongo.status == AppointmentStatus(expected_status).value,
        ).update(
            Set({"status": AppointmentStatus(status).value, "updated_at": datetime.utcnow()}),
            response_type=UpdateResponse.NEW_DOCUMENT,
        )
        if not appointment_mongo:
            return None
        return self._mongo_to_domain(appointment_mongo)

    async def _domain_to_mongo(self, appointment: Appointment) -> AppointmentMongo:
        """Convert domain entity to MongoDB model."""
        existing = await AppointmentMongo.find_one(
            AppointmentMongo.appointment_id == appointment.appointment_id
        )
        if existing:
            existing.status = appointment.status.value
            existing.notes = appointment.notes
            existing.updated_at = datetime.utcnow()
            return existing

        return AppointmentMongo(
            appointment_id=appointment.appointment_id,
            practitioner_id=appointment.practitioner_id,
            consumer_id=appointment.consumer_id,
            date=datetime.combine(appointment.date, time.min),
            time_slot=AppointmentSlotMongo(start=appointment.time_slot.start, end=appointment.time_slot.end),
            consultation_type=appointment.consultation_type.value,
            notes=appointment.notes,
            status=appointment.status.value,
            created_at=appointment.created_at,
            updated_at=appointment.updated_at,
        )

    def _mongo_to_domain(self, appointment_mongo: AppointmentMongo) -> Appointment:
        """Convert MongoDB model to domain entity."""
        stored_date = appointment_mongo.date
        return Appointment(
            appointment_id=appointment_mongo.appointment_id,
            practitioner_id=appointment_mongo.practitioner_id,
            consumer_id=appointment_mongo.consumer_id,
            date=stored_date.date() if isinstance(stored_date, datetime) else date.fromisoformat(str(stored_date)),
            time_slot=TimeSlot(start=appointment_mongo.time_slot.start, end=appointment_mongo.time_slot.end),
            consultation_type=appointment_mongo.consultation_type,
            notes=appointment_mongo.notes,
            status=AppointmentStatus(appointment_mongo.status),
            created_at=appointment_mongo.created_at,
            updated_at=appointment_mongo.updated_at,
        )
