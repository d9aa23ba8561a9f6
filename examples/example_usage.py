"""Example: summarise a trainee's attendance through the service layer."""

from src.trainee_attendance.trainee_attendance.main import create_services


def main():
    container = create_services()
    events = [
        {"date": "2024-01-01T07:30:00Z", "status": "present"},
        {"date": "2024-01-03", "status": "Late", "notes": "Traffic"},
        {"date": "2024-01-04", "status": "present"},
    ]
    summary = container.summary_service.build_summary(events, "2024-01-01", today="2024-01-05")
    print(summary.to_dict())


if __name__ == "__main__":
    main()
