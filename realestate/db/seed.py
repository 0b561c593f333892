"""
Database seeding functions.

Loads a small, realistic data set (agents, clients, listings with images,
one transaction and one upcoming viewing) through the service layer, so
every seeded record passes the same validation as API input.
"""

import logging
from datetime import timedelta
from typing import Dict

from realestate.core.config import now as app_now
from realestate.core.config import today as app_today
from realestate.db.session import SessionLocal
from realestate.repositories import (
    AgentRepository,
    AppointmentRepository,
    ClientRepository,
    PropertyImageRepository,
    PropertyRepository,
    TransactionRepository,
)
from realestate.services.agent_service import AgentService
from realestate.services.appointment_service import AppointmentService
from realestate.services.client_service import ClientService
from realestate.services.property_service import PropertyService
from realestate.services.transaction_service import TransactionService

logger = logging.getLogger(__name__)

SEED_AGENT_EMAIL = "maria.santos@example-realty.com"


def seed_sample_data() -> Dict[str, int]:
    """
    Insert the sample data set.

    Idempotent: if the first seed agent already exists nothing is written.
    Returns the number of records created per kind.
    """
    created = {
        "agents": 0,
        "clients": 0,
        "properties": 0,
        "images": 0,
        "transactions": 0,
        "appointments": 0,
    }
    with SessionLocal() as db:
        agents = AgentService(AgentRepository(db))
        if AgentRepository(db).get_by_email(SEED_AGENT_EMAIL) is not None:
            logger.info(
                "Seed data already present; skipping",
                extra={"context": {"email": SEED_AGENT_EMAIL}},
            )
            return created

        clients = ClientService(ClientRepository(db))
        properties = PropertyService(
            PropertyRepository(db),
            AgentRepository(db),
            ClientRepository(db),
            PropertyImageRepository(db),
        )
        transactions = TransactionService(
            TransactionRepository(db),
            AgentRepository(db),
            PropertyRepository(db),
            ClientRepository(db),
        )
        appointments = AppointmentService(
            AppointmentRepository(db),
            PropertyRepository(db),
            ClientRepository(db),
            AgentRepository(db),
        )

        expiry = app_today() + timedelta(days=365 * 2)
        maria = agents.create_agent(
            {
                "first_name": "Maria",
                "last_name": "Santos",
                "email": SEED_AGENT_EMAIL,
                "phone_number": "+15125550101",
                "license_number": "TX-RE-100234",
                "license_expiry_date": expiry,
                "address": "200 Congress Ave",
                "city": "Austin",
                "state": "TX",
                "postal_code": "78701",
                "commission_rate": "3.00",
                "specialization": "Residential",
                "years_experience": 8,
                "languages_spoken": "English, Portuguese, Spanish",
            }
        )
        james = agents.create_agent(
            {
                "first_name": "James",
                "last_name": "Okafor",
                "email": "james.okafor@example-realty.com",
                "phone_number": "+15125550102",
                "license_number": "TX-RE-100877",
                "license_expiry_date": expiry,
                "address": "1100 Lavaca St",
                "city": "Austin",
                "state": "TX",
                "postal_code": "78701",
                "commission_rate": "2.50",
                "specialization": "Commercial",
                "years_experience": 12,
            }
        )
        created["agents"] = 2

        buyer = clients.create_client(
            {
                "first_name": "Emily",
                "last_name": "Chen",
                "email": "emily.chen@example.com",
                "phone_number": "+15125550150",
                "address": "45 Rainey St",
                "city": "Austin",
                "state": "TX",
                "postal_code": "78701",
                "client_type": "BUYER",
                "budget_min": "300000",
                "budget_max": "550000",
                "preferred_locations": "Austin, Round Rock",
                "lead_source": "Website",
            }
        )
        seller = clients.create_client(
            {
                "first_name": "Robert",
                "last_name": "Miller",
                "email": "robert.miller@example.com",
                "phone_number": "+15125550151",
                "address": "812 Oak Hollow Dr",
                "city": "Round Rock",
                "state": "TX",
                "postal_code": "78664",
                "client_type": "SELLER",
                "lead_source": "Referral",
            }
        )
        created["clients"] = 2

        house = properties.create_property(
            {
                "title": "Family home near Brushy Creek",
                "description": "Single-story home with a large backyard.",
                "address": "812 Oak Hollow Dr",
                "city": "Round Rock",
                "state": "TX",
                "postal_code": "78664",
                "country": "USA",
                "property_type": "HOUSE",
                "listing_type": "SALE",
                "price": "489000.00",
                "bedrooms": 3,
                "bathrooms": 2,
                "square_feet": 1850,
                "year_built": 2004,
                "garage_spaces": 2,
                "property_condition": "GOOD",
                "agent_id": maria.id,
                "owner_id": seller.id,
            }
        )
        condo = properties.create_property(
            {
                "title": "Downtown condo with skyline view",
                "address": "360 Nueces St #1802",
                "city": "Austin",
                "state": "TX",
                "postal_code": "78701",
                "country": "USA",
                "property_type": "CONDO",
                "listing_type": "RENT",
                "price": "3200.00",
                "bedrooms": 1,
                "bathrooms": 1,
                "square_feet": 780,
                "hoa_fee": "450.00",
                "agent_id": maria.id,
            }
        )
        office = properties.create_property(
            {
                "title": "Office suite on East 6th",
                "address": "1601 E 6th St",
                "city": "Austin",
                "state": "TX",
                "postal_code": "78702",
                "property_type": "COMMERCIAL",
                "listing_type": "LEASE",
                "price": "7800.00",
                "bedrooms": 0,
                "bathrooms": 2,
                "square_feet": 2400,
                "agent_id": james.id,
            }
        )
        created["properties"] = 3

        for order, (url, caption) in enumerate(
            [
                ("https://images.example.com/oak-hollow/front.jpg", "Front"),
                ("https://images.example.com/oak-hollow/kitchen.jpg", "Kitchen"),
                ("https://images.example.com/oak-hollow/yard.jpg", "Backyard"),
            ]
        ):
            properties.add_image(
                house.id,
                {
                    "image_url": url,
                    "caption": caption,
                    "display_order": order,
                    "is_primary": order == 0,
                },
            )
            created["images"] += 1
        properties.add_image(
            condo.id,
            {
                "image_url": "https://images.example.com/nueces/living.jpg",
                "is_primary": True,
            },
        )
        created["images"] += 1

        transactions.create_transaction(
            {
                "agent_id": maria.id,
                "property_id": house.id,
                "client_id": buyer.id,
                "transaction_type": "SALE",
                "amount": "480000.00",
                "commission_amount": "14400.00",
                "notes": "Offer accepted, inspection pending.",
            }
        )
        created["transactions"] = 1

        appointments.create_appointment(
            {
                "property_id": office.id,
                "agent_id": james.id,
                "scheduled_at": (app_now() + timedelta(days=3)).replace(
                    hour=10, minute=0, second=0, microsecond=0
                ),
                "duration_minutes": 45,
                "appointment_type": "VIEWING",
            }
        )
        created["appointments"] = 1

    logger.info("Seed data created", extra={"context": created})
    return created
