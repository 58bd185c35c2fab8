# constants.py
# Fixed vocabularies for the export: record-kind tags, file naming, separators.

# Tag used in the uploaded file name, one per record kind
CREW_TAG = "crew"
CREDENTIALS_TAG = "credentials"
SEATIME_TAG = "seatime"
VESSELS_TAG = "vessels"
VESSEL_SCHEDULES_TAG = "vesselschedules"
VESSEL_SCHEDULE_POSITIONS_TAG = "vesselschedulepositions"
CREW_SCHEDULES_TAG = "crewschedules"
CREW_SCHEDULE_POSITIONS_TAG = "crewschedulepositions"

# {org}_{tag}_{unix seconds}.csv
FILE_NAME_TEMPLATE = "{org}_{tag}_{stamp}.csv"

# Remote folder the server picks files up from
REMOTE_DIR = "./data"

# Multi-value columns (endorsements) are packed into one cell with this
ENDORSEMENT_SEPARATOR = "*|*"

# Sea-time credit per day by shift length (hours)
SHIFT_MULTIPLIERS = {
    8: 1.0,
    12: 1.5,
}
