"""
Unit tests for veterinarian staff insights.
"""

import pytest
from datetime import date

from pawscore.models import staff_insights
from pawscore.schemas.results import AvailabilityStatus
from pawscore.schemas.staff_profile import (
    Authorization,
    AvailabilityProfile,
    Certification,
    CertificationStatus,
    ContactProfile,
    EmploymentProfile,
    EmploymentStatus,
    ExperienceProfile,
    Observations,
    PerformanceReview,
    ProfessionalLicense,
    ProfessionalStatistics,
    SkillsProfile,
    SpecialtyProfile,
    VeterinarianSpecialty,
    WorkHistoryEntry,
    WorkingHoursEntry,
)


AS_OF = date(2024, 6, 1)


@pytest.fixture
def professional():
    """Create a valid professional license for testing."""
    return ProfessionalLicense(
        license_number="CA123456",
        license_issue_date=date(2016, 7, 1),
        license_expiration_date=date(2026, 7, 1),
        licensing_authority="California VMB",
        veterinary_school="UC Davis",
        graduation_date=date(2016, 6, 1),
    )


class TestLicense:
    """Unit tests for license status and validation."""

    def test_valid_license(self, professional):
        assert staff_insights.is_license_valid(professional, AS_OF)
        assert staff_insights.can_practice(professional, AS_OF)
        assert not staff_insights.is_license_expired(professional, AS_OF)
        assert staff_insights.years_since_graduation(professional, AS_OF) == 8

    def test_expiring_soon_and_urgent(self, professional):
        assert staff_insights.is_license_expiring_soon(professional, as_of=date(2026, 6, 10))
        assert not staff_insights.needs_urgent_renewal(professional, date(2026, 6, 10))
        assert staff_insights.needs_urgent_renewal(professional, date(2026, 6, 28))
        assert not staff_insights.is_license_expiring_soon(professional, as_of=date(2026, 7, 2))

    def test_status_summary_messages(self, professional):
        """Test the summary message follows expiry, renewal and validity."""
        valid = staff_insights.license_status_summary(professional, date(2026, 5, 1))
        assert valid["message"] == "License valid for 61 days"
        assert valid["status"] == "active"

        renew = staff_insights.license_status_summary(professional, date(2026, 6, 21))
        assert renew["message"] == "License expires in 10 days - renew soon"
        assert renew["needs_renewal"] is True

        expired = staff_insights.license_status_summary(professional, date(2026, 8, 1))
        assert expired["message"] == "License expired - cannot practice"
        assert expired["status"] == "expired"
        assert expired["is_valid"] is False

        suspended = professional.model_copy(update={"license_status": CertificationStatus.SUSPENDED})
        assert staff_insights.license_status_summary(suspended, AS_OF)["message"] == "Invalid license status"

    def test_license_number_format(self):
        assert staff_insights.is_license_number_valid("CA123456")
        assert staff_insights.is_license_number_valid("mvzx1234")
        assert not staff_insights.is_license_number_valid("C123456")
        assert not staff_insights.is_license_number_valid("CA123")
        assert not staff_insights.is_license_number_valid("")

    def test_validation_report(self, professional):
        report = staff_insights.license_validation_report(professional, AS_OF)

        assert report.is_valid is True
        assert report.errors == []
        assert report.summary == "Valid veterinarian - Senior with 8 years of experience"

    def test_validation_report_failures(self, professional):
        broken = professional.model_copy(update={
            "license_number": "BAD",
            "license_issue_date": date(2015, 1, 1),
        })
        report = staff_insights.license_validation_report(broken, AS_OF)

        assert report.is_valid is False
        assert report.errors == ["Invalid license number format", "Inconsistent license dates"]
        assert report.summary == "Validation failed - 2 errors found"

    def test_recent_graduate_warning(self):
        professional = ProfessionalLicense(
            license_number="NY5555",
            license_issue_date=date(2024, 1, 15),
            license_expiration_date=date(2026, 1, 15),
            graduation_date=date(2024, 1, 1),
        )
        report = staff_insights.license_validation_report(professional, AS_OF)

        assert report.is_valid is True
        assert report.warnings == ["Recently graduated - supervision recommended"]

    def test_derived_license_values(self, professional):
        assert staff_insights.verification_code(professional) == "A163456"
        assert staff_insights.license_duration_years(professional) == 10.0
        assert staff_insights.education_summary(professional) == "UC Davis (2016)"
        assert staff_insights.license_progress_percentage(professional, date(2010, 1, 1)) == 0.0
        assert staff_insights.license_progress_percentage(professional, date(2030, 1, 1)) == 100.0


class TestEmployment:
    """Unit tests for employment schedule helpers."""

    @pytest.fixture
    def employee(self):
        return EmploymentProfile(
            employment_status=EmploymentStatus.FULL_TIME,
            start_date=date(2024, 4, 1),
            working_hours=[
                WorkingHoursEntry(day="Monday", start_time="09:00", end_time="17:00"),
                WorkingHoursEntry(day="Wednesday", start_time="09:00", end_time="13:30"),
                WorkingHoursEntry(day="Friday", start_time="22:00", end_time="06:00"),
                WorkingHoursEntry(day="Sunday", is_working_day=False),
            ],
        )

    def test_schedule_hours(self, employee):
        assert staff_insights.weekly_working_hours(employee) == 20.5
        assert staff_insights.working_days_per_week(employee) == 3
        assert staff_insights.daily_working_hours(employee) == 6.8
        assert staff_insights.available_days(employee) == ["monday", "wednesday", "friday"]

    def test_defaults_without_schedule(self):
        part_time = EmploymentProfile(employment_status=EmploymentStatus.PART_TIME, start_date=date(2020, 1, 1))
        contract = EmploymentProfile(employment_status=EmploymentStatus.CONTRACT, start_date=date(2020, 1, 1))

        assert staff_insights.weekly_working_hours(part_time) == 20
        assert staff_insights.working_days_per_week(part_time) == 3
        assert staff_insights.weekly_working_hours(contract) == 30
        assert staff_insights.is_temporary(contract)

    def test_availability_at_time(self, employee):
        assert staff_insights.is_available_at(employee, "monday", "12:00")
        assert staff_insights.is_available_at(employee, "FRIDAY", "23:00")
        assert not staff_insights.is_available_at(employee, "tuesday", "12:00")
        assert not staff_insights.works_on_day(employee, "sunday")

    def test_working_day_needs_hours(self, employee):
        assert staff_insights.works_on_day(employee, "Monday")

        employee.add_working_day("saturday", "", "")
        assert not staff_insights.works_on_day(employee, "saturday")

    def test_weekly_schedule(self, employee):
        schedule = staff_insights.weekly_schedule(employee)

        assert list(schedule) == staff_insights.DAYS_OF_WEEK
        assert schedule["monday"] == {"start_time": "09:00", "end_time": "17:00", "hours": 8}
        assert schedule["tuesday"] is None
        assert schedule["sunday"] is None

    def test_probation_and_benefits(self, employee):
        assert staff_insights.days_employed(employee, AS_OF) == 61
        assert staff_insights.is_in_probation(employee, AS_OF)
        assert not staff_insights.is_eligible_for_benefits(employee, AS_OF)
        assert staff_insights.is_eligible_for_benefits(employee, date(2024, 7, 1))

    def test_terminated_employment(self, employee):
        employee.terminate_employment(date(2024, 5, 1))

        assert not staff_insights.is_currently_employed(employee)
        assert staff_insights.days_employed(employee, AS_OF) == 30
        assert employee.employment_status == EmploymentStatus.INACTIVE

    def test_estimated_salary(self, employee):
        assert staff_insights.estimated_annual_salary(employee, 50) == 20.5 * 50 * 52


class TestAvailability:
    """Unit tests for the unavailability window."""

    def test_window(self):
        availability = AvailabilityProfile(unavailable_from=date(2024, 5, 20), unavailable_until=date(2024, 6, 10))

        assert not staff_insights.is_available_today(availability, AS_OF)
        assert staff_insights.availability_status(availability, AS_OF) == AvailabilityStatus.UNAVAILABLE
        assert staff_insights.days_until_return(availability, AS_OF) == 9
        assert staff_insights.is_available_today(availability, date(2024, 6, 11))

    def test_open_ended_window(self):
        availability = AvailabilityProfile(unavailable_from=date(2024, 7, 1))

        assert staff_insights.is_available_today(availability, AS_OF)
        assert not staff_insights.is_available_today(availability, date(2024, 8, 1))
        assert staff_insights.days_until_return(availability, date(2024, 8, 1)) is None

    def test_status(self):
        assert staff_insights.availability_status(AvailabilityProfile(), AS_OF) == AvailabilityStatus.AVAILABLE
        assert staff_insights.availability_status(
            AvailabilityProfile(available_for_assessments=False), AS_OF
        ) == AvailabilityStatus.LIMITED
        assert staff_insights.availability_status(
            AvailabilityProfile(is_active=False), AS_OF
        ) == AvailabilityStatus.INACTIVE


class TestSpecialty:
    """Unit tests for specialties and certifications."""

    @pytest.fixture
    def specialty(self):
        return SpecialtyProfile(
            primary_specialty=VeterinarianSpecialty.SHELTER_MEDICINE,
            additional_specialties=[VeterinarianSpecialty.SURGERY],
            certifications=[
                Certification(name="Animal Behavior Certificate", issued_by="ACVB",
                              issue_date=date(2021, 1, 1), expiration_date=date(2024, 6, 20)),
                Certification(name="Fear Free Certification", issued_by="Fear Free",
                              issue_date=date(2020, 1, 1), expiration_date=date(2023, 1, 1)),
                Certification(name="Surgery Board", issued_by="ACVS",
                              issue_date=date(2022, 1, 1), expiration_date=date(2027, 1, 1)),
            ],
        )

    def test_certification_lists(self, specialty):
        assert len(staff_insights.active_certifications(specialty, AS_OF)) == 2
        assert [c.name for c in staff_insights.expired_certifications(specialty, AS_OF)] == ["Fear Free Certification"]

        expiring = staff_insights.certifications_expiring_soon(specialty, as_of=AS_OF)
        assert len(expiring) == 1
        assert expiring[0]["days_until_expiry"] == 19
        assert staff_insights.needs_certification_renewal(specialty, AS_OF)

    def test_capabilities(self, specialty):
        assert staff_insights.is_shelter_medicine_specialist(specialty)
        assert not staff_insights.is_ethology_specialist(specialty)
        assert staff_insights.is_specialist(specialty)
        assert staff_insights.can_perform_behavior_assessments(specialty, AS_OF)
        assert staff_insights.has_active_certification_by_type(specialty, "behavior", AS_OF)
        assert not staff_insights.has_active_certification_by_type(specialty, "fear free", AS_OF)

    def test_summary_text(self, specialty):
        assert staff_insights.specialty_summary(specialty) == (
            "Primary specialty: shelter_medicine. Additional specialties: surgery"
        )
        assert staff_insights.specialty_summary(SpecialtyProfile()) == "Primary specialty: general_practice"

    def test_specialty_report(self, specialty):
        report = staff_insights.specialty_report(specialty, AS_OF)

        assert report["level"] == "Specialist"
        assert report["capabilities"] == ["Behavioral assessments", "Shelter medicine"]
        assert report["alerts"] == ["1 certification(s) expired", "1 certification(s) expiring soon"]
        assert report["recommendations"] == ["An animal behavior certification would be beneficial"]
        assert report["certification_summary"]["needs_action"] is True

    def test_general_practitioner_report(self):
        report = staff_insights.specialty_report(SpecialtyProfile(), AS_OF)

        assert report["level"] == "General"
        assert report["recommendations"] == ["Consider an additional specialization"]

    def test_profile_mutators(self, specialty):
        specialty.add_specialty(VeterinarianSpecialty.SURGERY)
        specialty.add_specialty(VeterinarianSpecialty.SHELTER_MEDICINE)
        assert specialty.additional_specialties == [VeterinarianSpecialty.SURGERY]

        renewed = Certification(name="Surgery Board", issued_by="ACVS",
                                issue_date=date(2024, 1, 1), expiration_date=date(2029, 1, 1))
        specialty.add_certification(renewed)
        assert len(specialty.certifications) == 3
        assert specialty.certifications[2].expiration_date == date(2029, 1, 1)


class TestExperience:
    """Unit tests for work history helpers."""

    @pytest.fixture
    def experience(self):
        return ExperienceProfile(
            years_of_experience=8,
            shelter_experience=3,
            behavior_assessment_experience=2,
            work_history=[
                WorkHistoryEntry(position="Associate Veterinarian", organization="Pet Clinic",
                                 start_date=date(2016, 7, 1), end_date=date(2019, 6, 30)),
                WorkHistoryEntry(position="Behavior Consultant", organization="Happy Tails Rescue",
                                 start_date=date(2019, 10, 1), end_date=date(2021, 3, 31)),
                WorkHistoryEntry(position="Shelter Veterinarian", organization="County Shelter",
                                 start_date=date(2021, 4, 1)),
            ],
        )

    def test_positions(self, experience):
        assert [job.organization for job in staff_insights.current_positions(experience)] == ["County Shelter"]
        assert len(staff_insights.previous_positions(experience)) == 2
        assert staff_insights.most_recent_position(experience).position == "Shelter Veterinarian"
        assert staff_insights.has_worked_in_shelters(experience)

    def test_employment_gaps(self, experience):
        gaps = staff_insights.employment_gaps(experience)

        assert gaps["has_gaps"] is True
        assert len(gaps["gaps"]) == 1
        assert gaps["gaps"][0]["start"] == date(2019, 6, 30)
        assert gaps["gaps"][0]["duration_months"] == 3

    def test_experience_in_position(self, experience):
        assert staff_insights.experience_in_position(experience, "veterinarian", AS_OF) == 6.2
        assert staff_insights.experience_in_position(experience, "surgeon", AS_OF) == 0.0

    def test_experience_summary(self, experience):
        summary = staff_insights.experience_summary(experience)

        assert summary["experience_level"] == "Senior"
        assert summary["shelter_experience"]["level"] == "Advanced"
        assert summary["behavior_experience"]["percentage"] == 25
        assert summary["has_gaps"] is True

    def test_recalculate_counters(self, experience):
        experience.recalculate_counters(AS_OF)

        assert experience.years_of_experience == 8
        assert experience.shelter_experience == 5
        assert experience.behavior_assessment_experience == 1


class TestSkillsAndRecords:
    """Unit tests for skills, statistics, observations and contact."""

    @pytest.fixture
    def skills(self):
        return SkillsProfile(
            areas_of_expertise=["Behavior assessment", "Shelter medicine", "Surgery"],
            languages=["English", "Spanish"],
            behavior_assessment_authorized=True,
            behavior_medication_authorized=True,
            second_opinion_provider=True,
        )

    def test_competency_report(self, skills):
        report = staff_insights.competency_report(skills)

        assert report["expertise"]["behavior_related"] == ["Behavior assessment"]
        assert report["languages"]["is_multilingual"] is True
        assert report["authorizations"]["level"] == "Expert"
        assert report["authorizations"]["active"] == [
            "Behavioral assessments",
            "Behavioral medication",
            "Second opinions",
        ]
        assert report["overall_profile"]["recommended_roles"] == [
            "Animal Behavior Specialist",
            "Senior Consultant",
            "International Communication Specialist",
        ]

    def test_compare_skills(self, skills):
        other = SkillsProfile(areas_of_expertise=["Surgery", "Dentistry"], languages=["English"])
        comparison = staff_insights.compare_skills(skills, other)

        assert comparison["expertise_comparison"]["shared"] == ["Surgery"]
        assert comparison["expertise_comparison"]["missing"] == ["Dentistry"]
        assert comparison["language_comparison"]["unique"] == ["Spanish"]

    def test_skill_mutators(self, skills):
        skills.add_language("english")
        assert skills.languages == ["English", "Spanish"]

        skills.update_authorizations({Authorization.ADOPTION_DECISION: True, Authorization.SECOND_OPINION: False})
        assert skills.adoption_decision_authorized is True
        assert skills.second_opinion_provider is False
        assert staff_insights.can_make_full_adoption_decisions(skills)

    def test_statistics_summary(self):
        statistics = ProfessionalStatistics(
            total_assessments=40,
            successful_adoptions=36,
            assessment_accuracy_rate=92,
            last_assessment_date=date(2024, 5, 22),
        )
        summary = staff_insights.statistics_summary(statistics, AS_OF)

        assert summary["adoption_success_rate"] == 90
        assert summary["performance_level"] == "Excellent"
        assert summary["days_since_last_assessment"] == 10

    def test_statistics_without_assessments(self):
        summary = staff_insights.statistics_summary(ProfessionalStatistics(), AS_OF)

        assert summary["adoption_success_rate"] == 0
        assert summary["days_since_last_assessment"] is None
        assert summary["performance_level"] == "Low"

    def test_observations(self):
        observations = Observations(
            biography="Shelter veterinarian with a decade of experience in behavior and welfare.",
            performance_reviews=[
                PerformanceReview(review_date=date(2022, 5, 1), rating=7),
                PerformanceReview(review_date=date(2023, 9, 1), rating=9),
            ],
        )

        assert staff_insights.has_complete_biography(observations)
        assert staff_insights.latest_review(observations).rating == 9
        assert not staff_insights.needs_recent_review(observations, AS_OF)
        assert staff_insights.needs_recent_review(observations, date(2024, 10, 1))

        summary = staff_insights.observations_summary(observations, AS_OF)
        assert summary["average_rating"] == 8.0
        assert summary["profile_completeness"] == 60

    def test_admin_notes_are_appended(self):
        observations = Observations()
        observations.update_admin_notes("Joined the team", date(2024, 1, 2))
        observations.update_admin_notes(" Completed onboarding ", date(2024, 2, 1))

        assert observations.admin_notes == "[2024-01-02] Joined the team\n\n[2024-02-01] Completed onboarding"

    def test_contact(self):
        contact = ContactProfile(address="1 Main St", emergency_contact="555 123 4567")

        assert staff_insights.has_complete_contact_info(contact)
        assert staff_insights.has_valid_emergency_contact(contact)
        assert not staff_insights.has_valid_emergency_contact(ContactProfile(emergency_contact="555 1234"))
        assert staff_insights.contact_summary(contact)["preferred_method"] == "Email"

    def test_authorization_name(self):
        assert staff_insights.authorization_name(Authorization.SECOND_OPINION) == "Second opinions"
        assert staff_insights.authorization_name("behavior_assessment") == "Behavioral assessments"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
