from typing import Optional, Tuple
from ..domain.models import DoFileTemplate

BASIC_ANALYSIS = DoFileTemplate(
    name="Basic Analysis",
    description="Template for basic data analysis",
    body="""* $date - Basic Data Analysis
* Author: [Your Name]

clear all
set more off

* Set working directory
cd "~/Documents/Stata"

* Load data
* use "dataset.dta", clear

* Describe data
describe
summarize

* Basic analysis
* Add your analysis here

* Save results
* save "results.dta", replace
""",
)

DATA_CLEANING = DoFileTemplate(
    name="Data Cleaning",
    description="Template for data cleaning and preparation",
    body="""* $date - Data Cleaning
* Author: [Your Name]

clear all
set more off

* Load raw data
* import delimited "rawdata.csv", clear

* Data cleaning steps
* 1. Check for missing values
* misstable summarize

* 2. Remove duplicates
* duplicates report
* duplicates drop

* 3. Label variables
* label variable var1 "Variable 1 Description"

* 4. Create new variables
* generate new_var = old_var * 100

* Save cleaned data
* save "cleaned_data.dta", replace
""",
)

REGRESSION_ANALYSIS = DoFileTemplate(
    name="Regression Analysis",
    description="Template for regression analysis",
    body="""* $date - Regression Analysis
* Author: [Your Name]

clear all
set more off

* Load data
* use "dataset.dta", clear

* Descriptive statistics
summarize

* Correlation matrix
correlate

* Basic regression
regress dependent_var independent_var1 independent_var2

* Check assumptions
* Residual plots
predict residuals, residuals
scatter residuals independent_var1

* Additional diagnostics
estat hettest
estat vif

* Robust regression
regress dependent_var independent_var1 independent_var2, robust
""",
)

PANEL_DATA_ANALYSIS = DoFileTemplate(
    name="Panel Data Analysis",
    description="Template for panel data analysis",
    body="""* $date - Panel Data Analysis
* Author: [Your Name]

clear all
set more off

* Load panel data
* use "panel_data.dta", clear

* Set panel structure
* xtset id time

* Describe panel structure
xtdescribe
xtsum

* Fixed effects regression
xtreg dependent_var independent_var1 independent_var2, fe

* Random effects regression
xtreg dependent_var independent_var1 independent_var2, re

* Hausman test
hausman fe re

* First difference regression
reg D.(dependent_var independent_var1 independent_var2)
""",
)

TIME_SERIES_ANALYSIS = DoFileTemplate(
    name="Time Series Analysis",
    description="Template for time series analysis",
    body="""* $date - Time Series Analysis
* Author: [Your Name]

clear all
set more off

* Load time series data
* use "timeseries.dta", clear

* Set time series structure
* tsset date

* Describe time series
tsline variable

* Unit root tests
dfuller variable
pperron variable

* If non-stationary, difference
* generate d_variable = D.variable
* dfuller d_variable

* ARIMA modeling
* arima variable, arima(1,1,1)

* Forecasting
* predict forecast, y
* tsline variable forecast
""",
)

EMPTY_TEMPLATE = DoFileTemplate(
    name="Empty Template",
    description="Blank do file with basic header",
    body="""* $date - [Project Name]
* Author: [Your Name]
* Description: [Brief description of what this do file does]

clear all
set more off

* Set working directory
* cd "~/Documents/Stata"

* Your code here

""",
)

TEMPLATES: Tuple[DoFileTemplate, ...] = (
    BASIC_ANALYSIS,
    DATA_CLEANING,
    REGRESSION_ANALYSIS,
    PANEL_DATA_ANALYSIS,
    TIME_SERIES_ANALYSIS,
    EMPTY_TEMPLATE,
)


def get_template(name: str) -> Optional[DoFileTemplate]:
    for template in TEMPLATES:
        if template.name == name:
            return template
    return None
