"""Fixed portfolio content served over REST and Socket.IO."""

SKILL_CATEGORIES = (
    "DevOps & Infrastructure",
    "Cloud Platforms",
    "Programming Languages",
    "Python Libraries & Frameworks",
    "ERP & Business Systems",
    "Databases & Storage",
    "System Administration",
    "Monitoring & Security",
    "Web Development",
)

# Announced to a client that asks for a portfolio update.
NEW_SKILLS = (
    "Odoo 17",
    "Advanced Kubernetes",
    "ML Pipeline Optimization",
)

CONTACT_THANKS = "Thank you for your message! I'll get back to you soon."
