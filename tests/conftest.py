"""
Pytest configuration for Pods Integrator tests.

This module provides:
1. A realistic project.pbxproj fixture with two targets
2. An IntegrationTarget factory pointing at that project
3. Log output redirected to a temporary directory
"""
import os
import tempfile
from pathlib import Path

import pytest

# Set up log directory before importing the package
os.environ['PODS_INTEGRATOR_LOG_DIR'] = tempfile.mkdtemp(prefix='pods_integrator_logs_')

from pods_integrator.core.integration_target import IntegrationTarget
from pods_integrator.lib.logger import reset_session


APP_TARGET_UUID = "0A0000000000000000000020"
TESTS_TARGET_UUID = "0A0000000000000000000021"
MISSING_TARGET_UUID = "0AFFFFFFFFFFFFFFFFFFFFFF"
FRAMEWORKS_GROUP_UUID = "0A0000000000000000000004"
CUSTOM_XCCONFIG_UUID = "0A0000000000000000000050"
PROXY_BUILD_FILE_UUID = "0A0000000000000000000013"

# App:       Debug overrides OTHER_LDFLAGS, Debug + Release override HEADER_SEARCH_PATHS,
#            Release keeps $(inherited) in OTHER_LDFLAGS.
# AppTests:  no overrides, Debug already has a base configuration, and its Frameworks
#            phase contains a PBXReferenceProxy named libPods.a (not a valid marker).
PBXPROJ_FIXTURE = r'''// !$*UTF8*$!
{
	archiveVersion = 1;
	classes = {
	};
	objectVersion = 46;
	objects = {

/* Begin PBXBuildFile section */
		0A0000000000000000000013 /* libPods.a in Frameworks */ = {isa = PBXBuildFile; fileRef = 0A0000000000000000000012 /* libPods.a */; };
/* End PBXBuildFile section */

/* Begin PBXFileReference section */
		0A0000000000000000000010 /* App.app */ = {isa = PBXFileReference; explicitFileType = wrapper.application; includeInIndex = 0; path = App.app; sourceTree = BUILT_PRODUCTS_DIR; };
		0A0000000000000000000011 /* AppTests.xctest */ = {isa = PBXFileReference; explicitFileType = wrapper.cfbundle; includeInIndex = 0; path = AppTests.xctest; sourceTree = BUILT_PRODUCTS_DIR; };
		0A0000000000000000000050 /* Custom.xcconfig */ = {isa = PBXFileReference; lastKnownFileType = text.xcconfig; path = Custom.xcconfig; sourceTree = "<group>"; };
/* End PBXFileReference section */

/* Begin PBXFrameworksBuildPhase section */
		0A0000000000000000000031 /* Frameworks */ = {
			isa = PBXFrameworksBuildPhase;
			buildActionMask = 2147483647;
			files = (
			);
			runOnlyForDeploymentPostprocessing = 0;
		};
		0A0000000000000000000034 /* Frameworks */ = {
			isa = PBXFrameworksBuildPhase;
			buildActionMask = 2147483647;
			files = (
				0A0000000000000000000013 /* libPods.a in Frameworks */,
			);
			runOnlyForDeploymentPostprocessing = 0;
		};
/* End PBXFrameworksBuildPhase section */

/* Begin PBXGroup section */
		0A0000000000000000000002 = {
			isa = PBXGroup;
			children = (
				0A0000000000000000000050 /* Custom.xcconfig */,
				0A0000000000000000000004 /* Frameworks */,
				0A0000000000000000000003 /* Products */,
			);
			sourceTree = "<group>";
		};
		0A0000000000000000000003 /* Products */ = {
			isa = PBXGroup;
			children = (
				0A0000000000000000000010 /* App.app */,
				0A0000000000000000000011 /* AppTests.xctest */,
			);
			name = Products;
			sourceTree = "<group>";
		};
		0A0000000000000000000004 /* Frameworks */ = {
			isa = PBXGroup;
			children = (
			);
			name = Frameworks;
			sourceTree = "<group>";
		};
/* End PBXGroup section */

/* Begin PBXNativeTarget section */
		0A0000000000000000000020 /* App */ = {
			isa = PBXNativeTarget;
			buildConfigurationList = 0A0000000000000000000043 /* Build configuration list for PBXNativeTarget "App" */;
			buildPhases = (
				0A0000000000000000000030 /* Sources */,
				0A0000000000000000000031 /* Frameworks */,
				0A0000000000000000000032 /* Resources */,
			);
			buildRules = (
			);
			dependencies = (
			);
			name = App;
			productName = App;
			productReference = 0A0000000000000000000010 /* App.app */;
			productType = "com.apple.product-type.application";
		};
		0A0000000000000000000021 /* AppTests */ = {
			isa = PBXNativeTarget;
			buildConfigurationList = 0A0000000000000000000046 /* Build configuration list for PBXNativeTarget "AppTests" */;
			buildPhases = (
				0A0000000000000000000033 /* Sources */,
				0A0000000000000000000034 /* Frameworks */,
			);
			buildRules = (
			);
			dependencies = (
			);
			name = AppTests;
			productName = AppTests;
			productReference = 0A0000000000000000000011 /* AppTests.xctest */;
			productType = "com.apple.product-type.bundle.unit-test";
		};
/* End PBXNativeTarget section */

/* Begin PBXProject section */
		0A0000000000000000000001 /* Project object */ = {
			isa = PBXProject;
			attributes = {
				LastUpgradeCheck = 0460;
			};
			buildConfigurationList = 0A0000000000000000000040 /* Build configuration list for PBXProject "App" */;
			compatibilityVersion = "Xcode 3.2";
			developmentRegion = English;
			hasScannedForEncodings = 0;
			knownRegions = (
				en,
			);
			mainGroup = 0A0000000000000000000002;
			productRefGroup = 0A0000000000000000000003 /* Products */;
			projectDirPath = "";
			projectRoot = "";
			targets = (
				0A0000000000000000000020 /* App */,
				0A0000000000000000000021 /* AppTests */,
			);
		};
/* End PBXProject section */

/* Begin PBXReferenceProxy section */
		0A0000000000000000000012 /* libPods.a */ = {
			isa = PBXReferenceProxy;
			fileType = archive.ar;
			path = libPods.a;
			sourceTree = BUILT_PRODUCTS_DIR;
		};
/* End PBXReferenceProxy section */

/* Begin PBXResourcesBuildPhase section */
		0A0000000000000000000032 /* Resources */ = {
			isa = PBXResourcesBuildPhase;
			buildActionMask = 2147483647;
			files = (
			);
			runOnlyForDeploymentPostprocessing = 0;
		};
/* End PBXResourcesBuildPhase section */

/* Begin PBXSourcesBuildPhase section */
		0A0000000000000000000030 /* Sources */ = {
			isa = PBXSourcesBuildPhase;
			buildActionMask = 2147483647;
			files = (
			);
			runOnlyForDeploymentPostprocessing = 0;
		};
		0A0000000000000000000033 /* Sources */ = {
			isa = PBXSourcesBuildPhase;
			buildActionMask = 2147483647;
			files = (
			);
			runOnlyForDeploymentPostprocessing = 0;
		};
/* End PBXSourcesBuildPhase section */

/* Begin XCBuildConfiguration section */
		0A0000000000000000000041 /* Debug */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				SDKROOT = iphoneos;
			};
			name = Debug;
		};
		0A0000000000000000000042 /* Release */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				SDKROOT = iphoneos;
			};
			name = Release;
		};
		0A0000000000000000000044 /* Debug */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				GCC_PREPROCESSOR_DEFINITIONS = (
					"DEBUG=1",
					"$(inherited)",
				);
				HEADER_SEARCH_PATHS = "Vendor/include";
				OTHER_LDFLAGS = "-ObjC";
				PRODUCT_NAME = "$(TARGET_NAME)";
			};
			name = Debug;
		};
		0A0000000000000000000045 /* Release */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				HEADER_SEARCH_PATHS = "Vendor/include";
				OTHER_LDFLAGS = "$(inherited) -lfoo";
				PRODUCT_NAME = "$(TARGET_NAME)";
			};
			name = Release;
		};
		0A0000000000000000000047 /* Debug */ = {
			isa = XCBuildConfiguration;
			baseConfigurationReference = 0A0000000000000000000050 /* Custom.xcconfig */;
			buildSettings = {
				PRODUCT_NAME = "$(TARGET_NAME)";
			};
			name = Debug;
		};
		0A0000000000000000000048 /* Release */ = {
			isa = XCBuildConfiguration;
			buildSettings = {
				OTHER_LDFLAGS = "";
				PRODUCT_NAME = "$(TARGET_NAME)";
			};
			name = Release;
		};
/* End XCBuildConfiguration section */

/* Begin XCConfigurationList section */
		0A0000000000000000000040 /* Build configuration list for PBXProject "App" */ = {
			isa = XCConfigurationList;
			buildConfigurations = (
				0A0000000000000000000041 /* Debug */,
				0A0000000000000000000042 /* Release */,
			);
			defaultConfigurationIsVisible = 0;
			defaultConfigurationName = Release;
		};
		0A0000000000000000000043 /* Build configuration list for PBXNativeTarget "App" */ = {
			isa = XCConfigurationList;
			buildConfigurations = (
				0A0000000000000000000044 /* Debug */,
				0A0000000000000000000045 /* Release */,
			);
			defaultConfigurationIsVisible = 0;
			defaultConfigurationName = Release;
		};
		0A0000000000000000000046 /* Build configuration list for PBXNativeTarget "AppTests" */ = {
			isa = XCConfigurationList;
			buildConfigurations = (
				0A0000000000000000000047 /* Debug */,
				0A0000000000000000000048 /* Release */,
			);
			defaultConfigurationIsVisible = 0;
			defaultConfigurationName = Release;
		};
/* End XCConfigurationList section */
	};
	rootObject = 0A0000000000000000000001 /* Project object */;
}
'''

XCCONFIG_ATTRIBUTES = {
    "OTHER_LDFLAGS": "-ObjC -lPods",
    "HEADER_SEARCH_PATHS": "\"${PODS_ROOT}/Headers\"",
    "GCC_PREPROCESSOR_DEFINITIONS": "$(inherited) COCOAPODS=1",
}


@pytest.fixture(autouse=True)
def fresh_log_session():
    """Each test gets its own logger session."""
    yield
    reset_session()


@pytest.fixture
def project_path(tmp_path) -> Path:
    """Write the fixture project to tmp_path/App.xcodeproj."""
    xcodeproj = tmp_path / "App.xcodeproj"
    xcodeproj.mkdir()
    (xcodeproj / "project.pbxproj").write_text(PBXPROJ_FIXTURE, encoding="utf-8")
    return xcodeproj


@pytest.fixture
def pbxproj_file(project_path) -> Path:
    return project_path / "project.pbxproj"


@pytest.fixture
def make_library(project_path):
    """Factory for IntegrationTarget descriptors bound to the fixture project."""
    def factory(**overrides) -> IntegrationTarget:
        data = dict(
            label="Pods",
            product_name="libPods.a",
            user_project_path=str(project_path),
            user_target_uuids=(APP_TARGET_UUID, TESTS_TARGET_UUID),
            xcconfig_path=str(project_path.parent / "Pods" / "Pods.xcconfig"),
            xcconfig_relative_path="Pods/Pods.xcconfig",
            copy_resources_script_relative_path="Pods/Pods-resources.sh",
            xcconfig_attributes=dict(XCCONFIG_ATTRIBUTES),
        )
        data.update(overrides)
        return IntegrationTarget(**data)
    return factory
