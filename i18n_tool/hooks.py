# FILE: i18n_tool/hooks.py
app_name = "i18n_tool"
app_title = "i18n Tool"
app_description = "Extract and check server translation strings"

app_license = "mit"


# Default roots, relative to the working directory
default_source_dir = "./"
default_enterprise_dir = "../enterprise"

# Catalog location under the primary source root
catalog_relpath = ("i18n", "en.json")

# Optional per-checkout settings file at the primary source root
config_filename = "i18n_tool.json"

# Only the primary root's vendor directory is excluded
vendor_dirname = "vendor"

# Go source files only; generated API client and tests are exempt
source_suffix = ".go"
test_suffix = "_test.go"
skip_path_suffixes = [
    "model/client4.go",  # generated REST client
]

# Identifiers built at runtime that no call site spells out.
# KEEP IN SYNC: update by hand whenever the user model changes how it
# concatenates password/field validation error ids, or when month names
# stop being looked up through T(monthName).
DYNAMICALLY_GENERATED_IDS = [
    # model/user.go: password policy errors, "pwd" + enabled rule suffixes
    "model.user.is_valid.pwd.app_error",
    "model.user.is_valid.pwd_lowercase.app_error",
    "model.user.is_valid.pwd_lowercase_number.app_error",
    "model.user.is_valid.pwd_lowercase_number_symbol.app_error",
    "model.user.is_valid.pwd_lowercase_symbol.app_error",
    "model.user.is_valid.pwd_lowercase_uppercase.app_error",
    "model.user.is_valid.pwd_lowercase_uppercase_number.app_error",
    "model.user.is_valid.pwd_lowercase_uppercase_number_symbol.app_error",
    "model.user.is_valid.pwd_lowercase_uppercase_symbol.app_error",
    "model.user.is_valid.pwd_number.app_error",
    "model.user.is_valid.pwd_number_symbol.app_error",
    "model.user.is_valid.pwd_symbol.app_error",
    "model.user.is_valid.pwd_uppercase.app_error",
    "model.user.is_valid.pwd_uppercase_number.app_error",
    "model.user.is_valid.pwd_uppercase_number_symbol.app_error",
    "model.user.is_valid.pwd_uppercase_symbol.app_error",
    # model/user.go: InvalidUserError("<field>", ...)
    "model.user.is_valid.id.app_error",
    "model.user.is_valid.create_at.app_error",
    "model.user.is_valid.update_at.app_error",
    "model.user.is_valid.username.app_error",
    "model.user.is_valid.email.app_error",
    "model.user.is_valid.nickname.app_error",
    "model.user.is_valid.position.app_error",
    "model.user.is_valid.first_name.app_error",
    "model.user.is_valid.last_name.app_error",
    "model.user.is_valid.auth_data.app_error",
    "model.user.is_valid.auth_data_type.app_error",
    "model.user.is_valid.auth_data_pwd.app_error",
    "model.user.is_valid.password_limit.app_error",
    "model.user.is_valid.locale.app_error",
    # Calendar month names, translated via T(time.Month.String())
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]
