"""Fixture data seeded into the in-memory repository on every boot."""

from __future__ import annotations

import uuid
from datetime import datetime

from message_center.schemas.message import Message, MessageType, Priority
from message_center.schemas.reference import MessageTemplate, Vendor

PREVIEW_LENGTH = 100


def make_preview(content: str) -> str:
    """First ``PREVIEW_LENGTH`` characters of *content*, with ``...`` if cut."""
    if len(content) > PREVIEW_LENGTH:
        return content[:PREVIEW_LENGTH] + "..."
    return content


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


_INBOX = [
    {
        "sender": "Impact Team",
        "subject": "Weekly Sales Report Required",
        "content": "Dear Team,\n\nPlease submit your weekly sales report by EOD Friday. "
        "Include inventory levels and any issues encountered during the week. "
        "This report is crucial for our monthly review meeting.\n\n"
        "Best regards,\nImpact Team",
        "priority": Priority.HIGH,
        "timestamp": "2025-01-22T10:30:00Z",
        "is_read": False,
        "has_attachment": False,
    },
    {
        "sender": "Impact Team",
        "subject": "New Product Launch Guidelines",
        "content": "Team,\n\nWe have a new product launch scheduled for next week. "
        "Please review the attached guidelines carefully and confirm receipt "
        "by replying to this message.\n\nThe launch timeline is tight, so "
        "immediate attention is required.\n\nThanks,\nImpact Team",
        "priority": Priority.MEDIUM,
        "timestamp": "2025-01-22T09:15:00Z",
        "is_read": False,
        "has_attachment": True,
    },
    {
        "sender": "Impact Team",
        "subject": "Store Compliance Audit",
        "content": "All Store Managers,\n\nA compliance audit has been scheduled for "
        "January 25th. Please ensure all documentation is ready for review, "
        "including:\n\n- Safety protocols\n- Employee training records\n"
        "- Inventory management logs\n- Customer service policies\n\n"
        "Failure to have documentation ready may result in compliance "
        "violations.\n\nRegards,\nCompliance Team",
        "priority": Priority.HIGH,
        "timestamp": "2025-01-21T14:45:00Z",
        "is_read": True,
        "has_attachment": False,
    },
    {
        "sender": "HR Department",
        "subject": "Team Building Event",
        "content": "Dear All,\n\nWe are excited to announce our quarterly team building "
        "event scheduled for next Friday at the community center.\n\n"
        "Activities include:\n- Team challenges\n- Lunch provided\n"
        "- Awards ceremony\n\nPlease RSVP by Wednesday so we can arrange "
        "catering accordingly.\n\nLooking forward to seeing everyone there!\n\nHR Team",
        "priority": Priority.LOW,
        "timestamp": "2025-01-20T16:20:00Z",
        "is_read": True,
        "has_attachment": False,
    },
    {
        "sender": "IT Support",
        "subject": "System Maintenance Window",
        "content": "Dear Users,\n\nWe have scheduled system maintenance for this weekend "
        "from 2 AM to 6 AM on Saturday.\n\nDuring this time, you may experience:\n"
        "- Brief service interruptions\n- Slower response times\n"
        "- Temporary unavailability of some features\n\nWe apologize for any "
        "inconvenience and appreciate your patience.\n\nIT Support Team",
        "priority": Priority.MEDIUM,
        "timestamp": "2025-01-19T11:30:00Z",
        "is_read": False,
        "has_attachment": False,
    },
]

_SENT = [
    {
        "recipient": "Impact Team",
        "recipient_email": "impact.team@company.com",
        "subject": "Weekly Sales Report - January Week 3",
        "content": "Dear Impact Team,\n\nPlease find attached the comprehensive weekly "
        "sales report for January week 3.\n\nKey Highlights:\n"
        "- Total Sales: $52,400 (15% above target)\n- New Customers: 28\n"
        "- Customer Retention: 94%\n- Top Performing Products: Electronics, Home Goods\n"
        "- Regional Performance: All regions showing positive growth\n\n"
        "Challenges Addressed:\n- Inventory shortage in electronics resolved\n"
        "- Staff training completed for new product lines\n"
        "- Customer feedback system implemented\n\nNext Week Goals:\n"
        "- Maintain current sales momentum\n- Launch new marketing campaign\n"
        "- Complete Q1 planning sessions\n\nPlease let me know if you need any "
        "additional details or clarification.\n\nBest regards,\n[Your Name]",
        "priority": Priority.HIGH,
        "timestamp": "2025-01-21T17:30:00Z",
        "has_attachment": True,
        "is_acknowledged": False,
    },
    {
        "recipient": "HR Department",
        "recipient_email": "hr@company.com",
        "subject": "Team Building Event - RSVP Confirmation",
        "content": "Hi HR Team,\n\nI wanted to confirm my attendance for the upcoming "
        "quarterly team building event scheduled for next Friday.\n\nI am excited "
        "about the planned activities and the opportunity to bond with the team "
        "outside of our usual work environment.\n\nPlease let "
        "me know if there is anything specific I should bring or prepare for "
        "the event.\n\nThank you for organizing this!\n\nBest regards,\n[Your Name]",
        "priority": Priority.LOW,
        "timestamp": "2025-01-20T15:45:00Z",
        "has_attachment": False,
        "is_acknowledged": True,
    },
    {
        "recipient": "IT Support",
        "recipient_email": "it.support@company.com",
        "subject": "System Access Request",
        "content": "Dear IT Support,\n\nI hope this email finds you well.\n\n"
        "I am writing to request access to the new inventory management system "
        "for myself and my team members. We will need the following access "
        "levels:\n\n- Read/Write access to inventory data\n"
        "- Report generation capabilities\n- User management for my team (5 members)\n\n"
        "Team members requiring access:\n1. John Smith - Manager\n"
        "2. Sarah Johnson - Analyst\n3. Mike Davis - Coordinator\n"
        "4. Lisa Brown - Assistant\n5. Tom Wilson - Intern\n\n"
        "We would appreciate it if this could be set up by the end of this week "
        "as we are planning to start using the system for our monthly inventory "
        "review.\n\nPlease let me know if you need any additional information or "
        "if there are any forms that need to be completed.\n\nThank you for your "
        "assistance.\n\nBest regards,\n[Your Name]",
        "priority": Priority.MEDIUM,
        "timestamp": "2025-01-19T09:20:00Z",
        "has_attachment": False,
        "is_acknowledged": False,
    },
    {
        "recipient": "Finance Department",
        "recipient_email": "finance@company.com",
        "subject": "Budget Approval Request - Q1 Marketing",
        "content": "Dear Finance Team,\n\nI am submitting a budget approval request for "
        "our Q1 marketing initiatives.\n\nRequested Budget Breakdown:\n"
        "- Digital Marketing Campaigns: $8,000\n- Print Advertising: $3,000\n"
        "- Event Sponsorships: $2,500\n- Marketing Materials: $1,500\n\n"
        "Total Requested: $15,000\n\nJustification:\nThese marketing initiatives "
        "are essential for:\n1. Increasing brand awareness in our target market\n"
        "2. Supporting the new product launch\n"
        "3. Driving customer acquisition and retention\n"
        "4. Competing effectively with market leaders\n\n"
        "Expected ROI: 300% based on previous campaign performance\n\n"
        "Attached you will find:\n- Detailed budget breakdown\n"
        "- Marketing strategy overview\n- Previous campaign performance data\n"
        "- Vendor quotes and proposals\n\nI would appreciate your review and "
        "approval at your earliest convenience so we can proceed with campaign "
        "planning.\n\nPlease let me know if you need any additional information.\n\n"
        "Thank you,\n[Your Name]",
        "priority": Priority.HIGH,
        "timestamp": "2025-01-18T14:15:00Z",
        "has_attachment": True,
        "is_acknowledged": False,
    },
]


def seed_messages() -> list[Message]:
    """Fresh copies of the fixture messages with newly generated ids."""
    messages = [
        Message(
            id=str(uuid.uuid4()),
            type=MessageType.INBOX,
            preview=make_preview(row["content"]),
            **{**row, "timestamp": _ts(row["timestamp"])},
        )
        for row in _INBOX
    ]
    messages += [
        Message(
            id=str(uuid.uuid4()),
            sender="You",
            is_read=True,
            type=MessageType.SENT,
            preview=make_preview(row["content"]),
            **{**row, "timestamp": _ts(row["timestamp"])},
        )
        for row in _SENT
    ]
    return messages


def seed_vendors() -> list[Vendor]:
    return [
        Vendor(id="vendor1", name="Acme Supplies", email="orders@acmesupplies.com", category="Office Supplies"),
        Vendor(id="vendor2", name="FreshFoods Distribution", email="sales@freshfoods.com", category="Food & Beverage"),
        Vendor(id="vendor3", name="TechPro Electronics", email="support@techpro.com", category="Electronics"),
        Vendor(id="vendor4", name="CleanCo Services", email="service@cleanco.com", category="Facilities"),
        Vendor(id="vendor5", name="Prime Logistics", email="dispatch@primelogistics.com", category="Shipping"),
    ]


def seed_templates() -> list[MessageTemplate]:
    return [
        MessageTemplate(
            id="template1",
            name="Order Request",
            subject="New Order Request",
            content="Hello,\n\nWe would like to place an order for the following items:\n\n"
            "- \n\nPlease confirm availability and expected delivery date.\n\nThank you.",
        ),
        MessageTemplate(
            id="template2",
            name="Delivery Follow-up",
            subject="Follow-up on Pending Delivery",
            content="Hello,\n\nWe are following up on our pending delivery. "
            "Could you please provide an updated delivery schedule?\n\nThank you.",
        ),
        MessageTemplate(
            id="template3",
            name="Invoice Query",
            subject="Question About Recent Invoice",
            content="Hello,\n\nWe have a question regarding a recent invoice. "
            "Please contact us at your earliest convenience to clarify the charges.\n\nThank you.",
        ),
        MessageTemplate(
            id="template4",
            name="Quality Issue",
            subject="Product Quality Concern",
            content="Hello,\n\nWe have identified a quality issue with a recent shipment. "
            "Details are below:\n\n- \n\nPlease advise on next steps.\n\nThank you.",
        ),
    ]
