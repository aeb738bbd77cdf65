"""
Build Phase 脚本模板和常量
"""

# Phase 名称常量
COPY_RESOURCES_PHASE_NAME = "Copy Pods Resources"
CHECK_MANIFEST_PHASE_NAME = "Check Pods Manifest.lock"

# build setting 继承标记
INHERITED_FLAG = "$(inherited)"

# 静态库文件名
STATIC_LIBRARY_PATH_TEMPLATE = "lib{label}.a"

# Frameworks 分组名称
FRAMEWORKS_GROUP_NAME = "Frameworks"

# 资源拷贝脚本，路径加引号以兼容空格
COPY_RESOURCES_SCRIPT_TEMPLATE = '"{path}"\n'

# Manifest.lock 检查脚本，放在 Build Phases 最前面以尽早失败
CHECK_MANIFEST_SCRIPT = '''diff "${PODS_ROOT}/../Podfile.lock" "${PODS_ROOT}/Manifest.lock" > /dev/null
if [[ $? != 0 ]] ; then
    cat << EOM
error: The sandbox is not in sync with the Podfile.lock. Run 'pod install'.
EOM
    exit 1
fi
'''

# build setting 被 Target 覆盖时给出的建议
OVERRIDE_ACTIONS = (
    f"Use the `{INHERITED_FLAG}` flag, or",
    "Remove the build settings from the target.",
)

OVERRIDE_MESSAGE_TEMPLATE = (
    "The target `{name}` overrides the `{key}` build setting "
    "defined in `{xcconfig}'."
)
